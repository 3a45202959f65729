# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import atexit
import subprocess
import sys
import traceback

import mantra.term.curses

from mantra import pager
from mantra.handoff import run_interactive
from mantra.io_selector import IOSelector
from mantra.logger import Logger
from mantra.pages import list_pages
from mantra.panes import PANE_CLASSES
from mantra.util import deep_get, deep_put
from mantra.windows import WindowManager

__all__ = ['Core', 'RunloopExit']


class RunloopExit(Exception):
    pass


class Core(object):
    """
    Owns the window manager and runs the input loop that drives it.
    """

    def __init__(self, frame_class=None, handoff=run_interactive):
        self._init_state()
        self.logger = Logger()
        self.io_selector = IOSelector(timeout=None)
        self.bookmarks = []
        self.pages = []
        self.frame = None
        self.windows = None
        self._frame_class = frame_class or mantra.term.curses.Frame
        self._handoff = handoff
        self._exit_handlers = []
        self._last_message = ''

    def _init_state(self):
        self._state = {}
        self.def_variable(['pager', 'command'], pager.DEFAULT_COMMAND)
        self.def_variable(['pager', 'flag'], pager.DEFAULT_FLAG)
        self.def_variable(['layout', 'bookmarks-width'], 0.3)
        self.def_variable(['layout', 'helpbar-height'], 1)

    # ------------ Variables -------------------------------

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)

    # ------------ Messages --------------------------------

    def message(self, msg, show_log=True, log_message=None):
        """
        Display a message in the help bar and log it.

        :param msg: The message to be displayed
        :param show_log: Set to False, to avoid appending the message to the log
        :param log_message: Provide an alternative text for appending to the log
        """
        self._last_message = msg
        if log_message:
            self.logger.log(log_message)
        elif show_log:
            self.logger.log(msg)

    def exception(self):
        """
        Call to log the last thrown exception.
        """
        exc_type, exc_value, exc_tb = sys.exc_info()
        self.message(traceback.format_exception_only(exc_type, exc_value)[-1].strip(),
                     log_message=traceback.format_exc())

    @property
    def last_message(self):
        return self._last_message

    # ------------ Lifecycle -------------------------------

    def add_exit_handler(self, handler_fn):
        self._exit_handlers.append(handler_fn)

    def _run_exit_handlers(self):
        while len(self._exit_handlers):
            try:
                self._exit_handlers.pop()()
            except Exception:
                self.logger.log(traceback.format_exc())

    def _at_exit(self):
        self._run_exit_handlers()
        for log_item in self.logger.messages:
            print(log_item)

    def load_pages(self):
        try:
            self.pages = list_pages(self.get_variable(['pager', 'command']))
        except (OSError, subprocess.CalledProcessError):
            self.exception()
            self.pages = []

    def start(self):
        """
        Set up the terminal and lay out all panes.

        Raises TerminalException if the terminal can not be initialized.
        """
        self.frame = self._frame_class(self)
        self.windows = WindowManager(self, self.frame, PANE_CLASSES, self._handoff)
        self.windows.initialize(bool(self.bookmarks))
        self.resize()

    # ------------ Input & Resizing ------------------------

    def resize(self):
        self.windows.resize()
        self.windows.clear_all()

    def redraw(self):
        self.frame.refresh()
        self.windows.clear_all()

    def bye(self):
        raise RunloopExit()

    def dispatch_input(self, keychord):
        if keychord == '<tab>':
            self.windows.cycle_active()
        elif keychord == 'q':
            self.bye()
        elif keychord == 'C-l':
            self.redraw()
        else:
            self.windows.dispatch_input(keychord)

    def run(self):
        atexit.register(self._at_exit)
        try:
            self.start()
            while True:
                self.windows.render()
                self.io_selector.select()
        except RunloopExit:
            self.message('Exiting.')
        finally:
            self._run_exit_handlers()
