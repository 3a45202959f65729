# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Terminal abstraction used by the window manager.

A Frame represents the terminal the program runs in, a Window is a
rectangular surface on that terminal. Implementations live in the
submodules of this package.

The terminal is owned either by the UI or by a child process that
has been handed the terminal. Ownership changes only through
``Frame.suspend`` and ``Frame.resume``; any attempt to draw while the
child owns the terminal raises TerminalException.
"""

from mantra.colors import INTENT_NORMAL
from mantra.errors import TerminalException

OWNER_UI    = 'ui'
OWNER_CHILD = 'child'


class Window(object):
    def resize(self, rows, cols):
        raise NotImplementedError()

    def move(self, y, x):
        raise NotImplementedError()

    def get_dimensions(self):
        raise NotImplementedError()

    def add_string(self, row, col, value, intent=INTENT_NORMAL):
        raise NotImplementedError()

    def insert_string(self, row, col, value, intent=INTENT_NORMAL):
        raise NotImplementedError()

    def draw_box(self, intent=INTENT_NORMAL):
        raise NotImplementedError()

    def update(self):
        raise NotImplementedError()


class Frame(object):
    def __init__(self, core=None):
        self._core = core
        self.owner = OWNER_UI
        self.initialize()

    def initialize(self):
        pass

    def close(self):
        pass

    def owned_by_ui(self):
        return self.owner == OWNER_UI

    def require_ownership(self):
        if not self.owned_by_ui():
            raise TerminalException('Terminal is owned by a child process.')

    def suspend(self):
        """Hand the terminal over to a child process."""
        if self.owner != OWNER_UI:
            raise TerminalException('Can not suspend, terminal is not owned by the UI.')
        self._suspend()
        self.owner = OWNER_CHILD

    def resume(self):
        """Take the terminal back after the child process exited."""
        if self.owner != OWNER_CHILD:
            raise TerminalException('Can not resume, terminal was not suspended.')
        self._resume()
        self.owner = OWNER_UI

    def _suspend(self):
        raise NotImplementedError()

    def _resume(self):
        raise NotImplementedError()

    def init_colors(self):
        pass

    def refresh(self):
        raise NotImplementedError()

    def get_dimensions(self):
        raise NotImplementedError()

    def create_window(self, dimensions):
        raise NotImplementedError()

    def update(self):
        pass
