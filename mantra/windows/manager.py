# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from mantra import pager
from mantra.colors import INTENT_ACTIVE, INTENT_NORMAL
from mantra.errors import MantraException
from mantra.handoff import run_interactive
from mantra.util import blank_line, minmax
from mantra.windows.pane import ROLES, ROLE_BOOKMARKS, ROLE_PAGES, ROLE_HELPBAR


class WindowManager(object):
    def __init__(self, core, frame, pane_classes, handoff=run_interactive):
        self._core = core
        self._frame = frame
        self._pane_classes = pane_classes
        self._handoff = handoff
        self._panes = []
        self._active_index = None

    @property
    def core(self):
        return self._core

    @property
    def panes(self):
        return tuple(self._panes)

    @property
    def active_index(self):
        return self._active_index

    def pane(self, role):
        return self._panes[self.pane_index(role)]

    def pane_index(self, role):
        for index, pane in enumerate(self._panes):
            if pane.role == role:
                return index
        raise KeyError('No pane with role %s.' % role)

    def initialize(self, has_bookmarks):
        """
        Create all panes in role order and select the initial active pane.

        The bookmark list becomes active if ``has_bookmarks`` is true,
        the page list otherwise. Raises TerminalException if a surface
        can not be allocated.
        """
        if self._panes:
            raise MantraException('Window manager is already initialized.')

        for role in ROLES:
            pane = self._pane_classes[role](self)
            if pane.role != role:
                raise MantraException('Pane class for %s has role %s.'
                                      % (role, pane.role))
            pane.surface = self._frame.create_window((0, 0, 0, 0))
            self._panes.append(pane)

        self._frame.init_colors()
        self.set_active(self.pane_index(ROLE_BOOKMARKS if has_bookmarks else ROLE_PAGES))

    # ------------ Layout ----------------------------------

    def layout(self, pane, x, y, rows, cols):
        self._frame.require_ownership()
        pane.surface.resize(rows, cols)
        pane.surface.move(y, x)
        pane.x, pane.y = x, y
        pane.rows, pane.cols = rows, cols
        if pane.on_resize:
            pane.on_resize()

    def resize(self):
        max_y, max_x = self._frame.get_dimensions()
        helpbar_rows = minmax(1, self._core.get_variable(['layout', 'helpbar-height']), max_y)
        body_rows = max(1, max_y - helpbar_rows)
        bookmark_cols = minmax(1,
                               int(max_x * self._core.get_variable(['layout', 'bookmarks-width'])),
                               max(1, max_x - 1))

        # Origins stay on screen, panes overlap on degenerate terminals
        pages_x = min(bookmark_cols, max(0, max_x - 1))
        helpbar_y = min(body_rows, max(0, max_y - 1))

        self.layout(self.pane(ROLE_BOOKMARKS), 0, 0, body_rows, bookmark_cols)
        self.layout(self.pane(ROLE_PAGES), pages_x, 0,
                    body_rows, max(1, max_x - pages_x))
        self.layout(self.pane(ROLE_HELPBAR), 0, helpbar_y,
                    max(1, min(helpbar_rows, max_y - helpbar_y)), max_x)

    # ------------ Clearing --------------------------------

    def clear_row(self, pane, row):
        self._frame.require_ownership()
        if not 0 <= row < pane.rows:
            raise IndexError('Row %s is outside of %s.' % (row, pane))
        pane.surface.insert_string(row, 0, blank_line(pane.cols))

    def clear_all(self):
        """Blank every pane, sized to what the terminal reports now."""
        for pane in self._panes:
            self._update_dimensions(pane)
            for row in range(pane.rows):
                self.clear_row(pane, row)

    # ------------ Active Pane -----------------------------

    def cycle_active(self):
        count = len(self._panes)
        for step in range(1, count):
            index = (self._active_index + step) % count
            if self._panes[index].can_be_active:
                self._active_index = index
                return

    def set_active(self, index):
        self._active_index = index

    def active_pane(self):
        return self._panes[self._active_index]

    def dispatch_input(self, keychord):
        self.active_pane().input(keychord)

    # ------------ Drawing ---------------------------------

    def _update_dimensions(self, pane):
        pane.rows, pane.cols = pane.surface.get_dimensions()

    def draw_all(self):
        self._frame.require_ownership()
        for pane in self._panes:
            self._update_dimensions(pane)
            pane.draw()

    def draw_border(self, pane):
        self._frame.require_ownership()
        intent = INTENT_ACTIVE if pane is self.active_pane() else INTENT_NORMAL
        pane.surface.draw_box(intent)

    def render(self):
        self.draw_all()
        for pane in self._panes:
            pane.surface.update()
        self._frame.update()

    # ------------ Pages -----------------------------------

    def open_page(self, section, page, line=None):
        """
        Show a man page in the pager and return the pager's exit code.

        The terminal is handed to the pager for the duration of the call
        and every pane is blanked once it returns, so that no output of
        the pager remains on screen.
        """
        argv = pager.build_command(section, page,
                                   self._core.get_variable(['pager', 'command']),
                                   self._core.get_variable(['pager', 'flag']))
        jump = pager.jump_command(line)

        self._frame.suspend()
        try:
            exit_code = self._handoff(argv, jump)
        finally:
            self._frame.resume()
        self._frame.refresh()
        self.clear_all()

        self._core.logger.log('%s exited with %s' % (' '.join(argv), exit_code))
        return exit_code
