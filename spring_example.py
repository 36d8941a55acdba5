import logging

import pygame

from constants import BLACK, DT, FPS, HEIGHT, KEY_STEP, WHITE, WIDTH
from animation.controller import AnimationController
from animation.kinds import AnimationKind
from animation.parameters import ParameterPanel
from animation.render import TrackView, draw_parameters

# key -> (parameter name, direction)
NUDGE_KEYS = {
    pygame.K_UP: ("damping", 1),
    pygame.K_DOWN: ("damping", -1),
    pygame.K_RIGHT: ("velocity_x", 1),
    pygame.K_LEFT: ("velocity_x", -1),
    pygame.K_PAGEUP: ("velocity_y", 1),
    pygame.K_PAGEDOWN: ("velocity_y", -1),
    pygame.K_EQUALS: ("speed", 1),
    pygame.K_PLUS: ("speed", 1),
    pygame.K_MINUS: ("speed", -1),
}


def nudge(panel, name, direction, step=KEY_STEP):
    """Move a parameter by a fraction of its range, like a keyboard-driven slider."""
    p = panel.parameter(name)
    return panel.set_value(name, p.value + direction * step * (p.maximum - p.minimum))


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# --- Pygame Setup ---
pygame.init()
screen = pygame.display.set_mode((WIDTH, HEIGHT))
pygame.display.set_caption("Spring Example")
clock = pygame.time.Clock()
font = pygame.font.Font(None, 28)

# --- Animation Setup ---
panel = ParameterPanel()
view = TrackView(WIDTH, HEIGHT)
controller = AnimationController(panel, view)
controller.layout()

# --- Main Loop ---
running = True
while running:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in NUDGE_KEYS:
                nudge(panel, *NUDGE_KEYS[event.key])
            elif event.key == pygame.K_t:
                controller.set_kind(AnimationKind.TRANSLATE_X)
            elif event.key == pygame.K_s:
                controller.set_kind(AnimationKind.SCALE)
            elif event.key == pygame.K_ESCAPE:
                running = False

    # --- Update ---
    controller.update(DT)

    # --- Draw ---
    screen.fill(WHITE)
    view.draw(screen, controller.transform)
    draw_parameters(screen, font, panel, controller.kind)
    hint = font.render("Up/Down damping  Left/Right vel X  PgUp/PgDn vel Y  +/- speed", True, BLACK)
    screen.blit(hint, (10, HEIGHT - 30))

    pygame.display.flip()

    clock.tick(FPS)

controller.stop()
pygame.quit()
