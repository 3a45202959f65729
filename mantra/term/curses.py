# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import curses
import signal
import sys

from mantra import colors
from mantra import term
from mantra.colors import INTENT_NORMAL
from mantra.errors import TerminalException
from mantra.term import keyreader

TERMINAL_RESIZE_EVENT = 'SIGWINCH'

COLOR_INDEX_MAP = {
    'black':   curses.COLOR_BLACK,
    'red':     curses.COLOR_RED,
    'green':   curses.COLOR_GREEN,
    'yellow':  curses.COLOR_YELLOW,
    'blue':    curses.COLOR_BLUE,
    'magenta': curses.COLOR_MAGENTA,
    'cyan':    curses.COLOR_CYAN,
    'white':   curses.COLOR_WHITE
}


def curses_colpair(intent):
    return curses.color_pair(colors.intent_index(intent))


class Window(term.Window):
    def __init__(self, frame, dimensions):
        self._frame = frame
        try:
            self._handle = curses.newwin(*dimensions)
        except curses.error as e:
            raise TerminalException('Could not allocate window %s: %s'
                                    % (str(dimensions), e))

    def resize(self, rows, cols):
        self._handle.resize(rows, cols)

    def move(self, y, x):
        self._handle.mvwin(y, x)

    def get_dimensions(self):
        return self._handle.getmaxyx()

    def add_string(self, row, col, value, intent=INTENT_NORMAL):
        if len(value) == 0:
            return
        self._handle.addstr(row, col, value, curses_colpair(intent))

    def insert_string(self, row, col, value, intent=INTENT_NORMAL):
        if len(value) == 0:
            return
        self._handle.insstr(row, col, value, curses_colpair(intent))

    def draw_box(self, intent=INTENT_NORMAL):
        attr = curses_colpair(intent)
        self._handle.attron(attr)
        try:
            self._handle.box()
        finally:
            self._handle.attroff(attr)

    def update(self):
        self._handle.noutrefresh()


class Frame(term.Frame):
    def initialize(self):
        self._old_signal_handler = None

        # Init Curses
        try:
            self._screen = curses.initscr()
        except curses.error as e:
            raise TerminalException('Could not initialize terminal: %s' % e)
        curses.savetty()
        curses.cbreak()
        curses.nonl()
        curses.noecho()
        curses.curs_set(0)
        self._screen.keypad(1)
        self._screen.timeout(0)
        self._core.add_exit_handler(self.close)

        # Init Event Handling
        self._core.io_selector.register(sys.stdin, self._read_input)
        self._core.io_selector.register_async(TERMINAL_RESIZE_EVENT,
                                              self._handle_resize)
        self._old_signal_handler = signal.getsignal(signal.SIGWINCH)
        signal.signal(signal.SIGWINCH, self._handle_resize_sig)

    def close(self):
        if self._old_signal_handler:
            signal.signal(signal.SIGWINCH, self._old_signal_handler)
        self._core.io_selector.unregister_async(TERMINAL_RESIZE_EVENT)
        self._core.io_selector.unregister(sys.stdin)
        if self.owned_by_ui():
            curses.resetty()
            curses.endwin()

    # ------------ Terminal: Ownership ---------------------

    def _suspend(self):
        try:
            curses.def_prog_mode()
            curses.endwin()
        except curses.error as e:
            raise TerminalException('Could not release terminal: %s' % e)

    def _resume(self):
        try:
            curses.reset_prog_mode()
        except curses.error as e:
            raise TerminalException('Could not reacquire terminal: %s' % e)
        # The terminal may have been resized while the child owned it
        self._core.io_selector.post_async_event(TERMINAL_RESIZE_EVENT)

    def refresh(self):
        self._screen.refresh()

    # ------------ Terminal: Input & Resizing --------------

    def _read_input(self, _):
        # curses may have buffered more than one key
        while True:
            keychord = keyreader.read_keychord(self._screen)
            if keychord is None:
                return
            if keychord != keyreader.EVT_RESIZE:
                self._core.dispatch_input(keychord)

    def _handle_resize_sig(self, _, __):
        self._core.io_selector.post_async_event(TERMINAL_RESIZE_EVENT)

    def _handle_resize(self, _):
        curses.endwin()
        self._screen.refresh()

        # Clear input queue
        keyreader.read_keychord(self._screen)
        keyreader.read_keychord(self._screen)

        self._core.resize()

    # ------------ Colors ----------------------------------

    def init_colors(self):
        if not curses.has_colors():
            return
        curses.start_color()
        for intent in colors.intent_names():
            pair_index = colors.intent_index(intent)
            if pair_index == 0:  # Cannot change first entry
                continue
            foreground, background = colors.intent_colors(intent)
            curses.init_pair(pair_index,
                             COLOR_INDEX_MAP[foreground],
                             COLOR_INDEX_MAP[background])

    # ------------ Windows ---------------------------------

    def get_dimensions(self):
        return self._screen.getmaxyx()

    def create_window(self, dimensions):
        return Window(self, dimensions)

    def update(self):
        self.require_ownership()
        curses.doupdate()
