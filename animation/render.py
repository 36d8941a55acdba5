import pygame

import constants


class TrackView:
    """Pygame rendering surface: a grey track with the animated square on it.

    Geometry follows the window size; the controller reads ``track_width``
    and ``square_size`` from here when it builds a forward task.
    """

    def __init__(self, width, height, margin=constants.CONTENT_MARGIN, track_factor=constants.TRACK_SIZE_FACTOR,
                 track_height=constants.TRACK_HEIGHT, square_size=constants.SQUARE_SIZE):
        self.margin = margin
        self.track_factor = track_factor
        self.track_height = track_height
        self.square_size = square_size
        self.resize(width, height)

    def resize(self, width, height):
        self.width = width
        self.height = height
        content_width = width - self.margin * 2
        track_width = int(content_width * self.track_factor)
        track_height = min(self.track_height, height - self.margin * 2)
        self.track_rect = pygame.Rect(0, 0, track_width, track_height)
        self.track_rect.centerx = width // 2
        self.track_rect.top = self.margin

    @property
    def track_width(self):
        return self.track_rect.width

    def square_rect(self, transform):
        """Where the square lands for ``transform``, measured from the track's left edge."""
        cx = self.track_rect.left + self.square_size / 2.0
        cy = self.track_rect.centery
        w = self.square_size * transform.sx
        h = self.square_size * transform.sy
        rect = pygame.Rect(0, 0, max(0, round(w)), max(0, round(h)))
        rect.center = (round(cx + transform.tx), round(cy + transform.ty))
        return rect

    def draw(self, screen, transform):
        pygame.draw.rect(screen, constants.LIGHT_GRAY, self.track_rect)
        pygame.draw.rect(screen, constants.RED, self.square_rect(transform))


def draw_parameters(screen, font, panel, kind, paused=False, top=constants.PANEL_TOP):
    """Labels and values of the panel, one line each, like the original slider rows."""
    x = constants.CONTENT_MARGIN * 2
    y = top
    rows = [("Animation:", kind.label)] + [(p.label, p.format_value()) for p in panel]
    for label, value in rows:
        surf = font.render(f"{label} {value}", True, constants.BLACK)
        screen.blit(surf, (x, y))
        y += constants.PANEL_LINE_HEIGHT
    if paused:
        pause_text = font.render("PAUSED", True, constants.BLACK)
        screen.blit(pause_text, (screen.get_width() - pause_text.get_width() - 10, top))
    return y
