from __future__ import annotations

"""
DotMatrix - Pygame Display Manager

Owns the demo window, the screen registry, the nav bar and event dispatch.

The UIManager can be constructed in two modes:

  1. Window mode (no surface argument):
       mgr = UIManager()
     pygame.init() is called and a resizable SCREEN_W x SCREEN_H window is
     created, together with the frame clock and fonts.

  2. Headless / test mode (surface provided):
       mgr = UIManager(surface)
     pygame is NOT re-initialised.  The supplied surface is drawn into
     directly; display flips and the frame clock are skipped.

Screens are plain objects implementing:
  update(dt), draw(surface), handle_event(event)
and optionally on_enter(), on_exit(), on_resize(content_rect).
"""

import logging

import pygame

from . import config

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

BG_COLOR    = (20,  20,  20)
TEXT_COLOR  = (226, 232, 240)
ACCENT      = (255, 55,  0)    # matches the default dot color
NAV_BG      = (8,   8,   8)
NAV_BORDER  = (40,  40,  40)


# ---------------------------------------------------------------------------
# Text helpers (shared with the screens)
# ---------------------------------------------------------------------------

def load_font(family: str, size: int, bold: bool = False) -> pygame.font.Font:
    """Load a font by family name with a fallback to the default font."""
    font = pygame.font.SysFont(family, size, bold=bold)
    if font is None:
        font = pygame.font.Font(None, size)
    return font


def draw_text(surface, text, font, color, x, y, anchor="topleft") -> pygame.Rect:
    """Render *text* onto *surface* with its *anchor* point at (x, y)."""
    surf = font.render(text, True, color)
    rect = surf.get_rect()
    setattr(rect, anchor, (x, y))
    surface.blit(surf, rect)
    return rect


class UIManager:
    """Registered screens plus the nav bar that switches between them.

    Only the active screen receives update(), draw() and pointer input.
    VIDEORESIZE is forwarded to every screen so inactive ones keep their
    layout in step with the window.

    Args:
        surface: Optional pygame.Surface for headless / test mode.
    """

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def __init__(self, surface=None) -> None:
        self._test_mode = surface is not None

        if self._test_mode:
            pygame.font.init()
            self._surface = surface
            self.clock = None
        else:
            pygame.init()
            self._surface = pygame.display.set_mode(
                (config.SCREEN_W, config.SCREEN_H), pygame.RESIZABLE
            )
            pygame.display.set_caption("DotMatrix")
            self.clock = pygame.time.Clock()
        self._init_fonts_safe()

        # Screen registry, in registration order (that is also nav order)
        self._screens: dict[str, object] = {}
        self._labels: dict[str, str] = {}
        self._active: str | None = None

        # Nav hit-rects are rebuilt on every draw_nav_bar()
        self._nav_rects: list[tuple[pygame.Rect, str]] = []

    @property
    def screen(self) -> pygame.Surface:
        return self._surface

    @property
    def current_screen(self) -> str | None:
        return self._active

    @property
    def content_rect(self) -> pygame.Rect:
        """Area above the nav bar available to screens."""
        w, h = self._surface.get_size()
        return pygame.Rect(0, 0, w, max(0, h - config.NAV_H))

    @property
    def nav_rect(self) -> pygame.Rect:
        w, h = self._surface.get_size()
        return pygame.Rect(0, max(0, h - config.NAV_H), w, config.NAV_H)

    # ------------------------------------------------------------------
    # Font loading
    # ------------------------------------------------------------------

    def _init_fonts_safe(self) -> None:
        """Load DejaVu Sans, falling back to pygame's default font."""
        self.body_font = load_font("dejavusans", 16)

    # ------------------------------------------------------------------
    # Screen registry
    # ------------------------------------------------------------------

    def register_screen(self, name: str, screen_obj, label: str | None = None) -> None:
        """Add a screen under *name*; *label* is the nav tab text.

        The screen is immediately told the current content area so it can
        lay out its widgets before the first draw.
        """
        self._screens[name] = screen_obj
        self._labels[name] = label or name.replace("_", " ").title()
        if hasattr(screen_obj, "on_resize"):
            screen_obj.on_resize(self.content_rect)

    def switch_to(self, name: str) -> None:
        """Activate the named screen.

        Raises:
            KeyError: If *name* has not been registered.
        """
        if name not in self._screens:
            raise KeyError(f"Unknown screen: {name!r}")
        if self._active is not None and self._active != name:
            old = self._screens[self._active]
            if hasattr(old, "on_exit"):
                old.on_exit()
        self._active = name
        new = self._screens[name]
        if hasattr(new, "on_enter"):
            new.on_enter()
        log.info("Switched to screen %s", name)

    def switch_screen(self, name: str) -> None:
        """Alias for :meth:`switch_to`."""
        self.switch_to(name)

    def cycle(self, step: int) -> None:
        """Activate the screen *step* places after the current one (wrapping)."""
        if not self._screens:
            return
        names = list(self._screens)
        index = names.index(self._active) if self._active in names else 0
        self.switch_to(names[(index + step) % len(names)])

    # ------------------------------------------------------------------
    # Main-loop hooks
    # ------------------------------------------------------------------

    def handle_event(self, event) -> None:
        """Forward a single pygame event to the active screen (if any)."""
        if self._active is not None:
            self._screens[self._active].handle_event(event)

    def handle_events(self) -> bool:
        """Drain the pygame event queue.

        Returns:
            ``False`` if the application should quit (QUIT or Escape),
            ``True`` otherwise.
        """
        for event in pygame.event.get():
            if not self.dispatch(event):
                return False
        return True

    def dispatch(self, event) -> bool:
        """Route one event; returns ``False`` for quit requests."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_LEFT:
                self.cycle(-1)
                return True
            if event.key == pygame.K_RIGHT:
                self.cycle(+1)
                return True
        if event.type == pygame.VIDEORESIZE:
            self.on_window_resized()
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._nav_hit(event.pos) is not None:
                return True
        self.handle_event(event)
        return True

    def on_window_resized(self) -> None:
        """Pick up the new display surface and re-layout every screen."""
        if not self._test_mode:
            self._surface = pygame.display.get_surface()
        content = self.content_rect
        log.debug("Window resized, content area %s", content)
        for screen in self._screens.values():
            if hasattr(screen, "on_resize"):
                screen.on_resize(content)

    def update(self, dt: float) -> None:
        if self._active is not None:
            self._screens[self._active].update(dt)

    def draw(self) -> None:
        """Render the active screen, then overlay the nav bar."""
        self._surface.fill(BG_COLOR)
        if self._active is not None:
            self._screens[self._active].draw(self._surface)
        self.draw_nav_bar()

        if not self._test_mode:
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(config.FPS)

    # ------------------------------------------------------------------
    # Nav bar
    # ------------------------------------------------------------------

    def draw_nav_bar(self) -> None:
        """Draw one tab per registered screen and rebuild the nav hit-rects."""
        nav = self.nav_rect
        pygame.draw.rect(self._surface, NAV_BG, nav)
        pygame.draw.line(self._surface, NAV_BORDER, nav.topleft,
                         (nav.right - 1, nav.top), 1)

        self._nav_rects = []
        if not self._screens:
            return
        btn_w = nav.width // len(self._screens)
        for i, name in enumerate(self._screens):
            rect = pygame.Rect(nav.x + i * btn_w, nav.y + 1, btn_w, nav.height - 1)
            self._nav_rects.append((rect, name))

            is_active = name == self._active
            if is_active:
                pygame.draw.rect(self._surface, ACCENT, rect)
            self.draw_text(self._labels[name], self.body_font,
                           BG_COLOR if is_active else TEXT_COLOR,
                           rect.centerx, rect.centery, anchor="center")

    def _nav_hit(self, pos) -> str | None:
        """Switch to the tab under *pos*; return its screen name or None."""
        for rect, name in self._nav_rects:
            if rect.collidepoint(pos):
                self.switch_to(name)
                return name
        return None

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------

    def draw_text(
        self,
        text: str,
        font: pygame.font.Font,
        color: tuple,
        x: int,
        y: int,
        anchor: str = "topleft",
    ) -> pygame.Rect:
        """Render *text* onto the managed surface at the given anchor point."""
        return draw_text(self._surface, text, font, color, x, y, anchor)
