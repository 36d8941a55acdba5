import logging
from multiprocessing import Process, Manager

import pygame

from constants import BLACK, DT, FPS, HEIGHT, WHITE, WIDTH
from animation.controller import AnimationController
from animation.kinds import AnimationKind
from animation.parameters import ParameterPanel
from animation.shared import apply_shared, push_panel, seed_shared, status_line
from animation.render import TrackView, draw_parameters
import gui_controller as gui_ctrl

log = logging.getLogger(__name__)

KIND_KEYS = {
    pygame.K_t: AnimationKind.TRANSLATE_X,
    pygame.K_s: AnimationKind.SCALE,
}


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Spring Animation Playground")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)

    panel = ParameterPanel()
    view = TrackView(WIDTH, HEIGHT)
    controller = AnimationController(panel, view)

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    seed_shared(_shared)
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()
    log.info("control window started (pid %s)", _gui_proc.pid)

    running = True
    laid_out = False
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in KIND_KEYS:
                    controller.set_kind(KIND_KEYS[event.key])
                    _shared['kind'] = controller.kind.label
                elif event.key == pygame.K_r:
                    panel.reset()
                    push_panel(_shared, panel)
                elif event.key == pygame.K_SPACE:
                    controller.toggle_pause()

        # --- Handle GUI updates ---
        if not apply_shared(_shared, panel, controller):
            running = False

        # first frame: the surface has a size now
        if not laid_out:
            controller.layout()
            laid_out = True

        # --- Update ---
        controller.update(DT)
        _shared['status'] = status_line(controller)

        # --- Draw ---
        screen.fill(WHITE)
        view.draw(screen, controller.transform)
        draw_parameters(screen, font, panel, controller.kind, paused=controller.is_paused)
        hint = font.render("T/S kind  R reset  Space pause  Esc quit", True, BLACK)
        screen.blit(hint, (10, HEIGHT - 30))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    controller.stop()
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
