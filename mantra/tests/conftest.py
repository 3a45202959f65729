import pytest

from mantra import term
from mantra.core import Core
from mantra.errors import TerminalException
from mantra.pages import Bookmark, Page


class FakeWindow(term.Window):
    """Surface that records what is written to it."""

    def __init__(self, frame, dimensions):
        self._frame = frame
        self.rows, self.cols, self.y, self.x = dimensions
        if self.rows == 0 or self.cols == 0:
            self.rows, self.cols = frame.dimensions
        self.writes = []
        self.boxes = []

    def resize(self, rows, cols):
        self.rows, self.cols = rows, cols

    def move(self, y, x):
        self.y, self.x = y, x

    def get_dimensions(self):
        return (self.rows, self.cols)

    def add_string(self, row, col, value, intent='normal'):
        self.writes.append((row, col, value, intent))

    def insert_string(self, row, col, value, intent='normal'):
        self.writes.append((row, col, value, intent))

    def draw_box(self, intent='normal'):
        self.boxes.append(intent)

    def update(self):
        pass


class FakeFrame(term.Frame):
    fail_create = False

    def initialize(self):
        self.calls = []
        self.windows = []
        self.dimensions = (24, 80)

    def _suspend(self):
        self.calls.append('suspend')

    def _resume(self):
        self.calls.append('resume')

    def init_colors(self):
        self.calls.append('init_colors')

    def refresh(self):
        self.calls.append('refresh')

    def get_dimensions(self):
        return self.dimensions

    def create_window(self, dimensions):
        if self.fail_create:
            raise TerminalException('Could not allocate window.')
        window = FakeWindow(self, dimensions)
        self.windows.append(window)
        return window

    def update(self):
        self.require_ownership()
        self.calls.append('update')


class RecordingHandoff(object):
    def __init__(self):
        self.exit_code = 0
        self.calls = []
        self.frame = None

    def __call__(self, argv, initial_input=None):
        self.calls.append((argv, initial_input))
        if self.frame is not None:
            self.frame.calls.append('run')
            assert not self.frame.owned_by_ui()
        return self.exit_code


@pytest.fixture
def handoff():
    return RecordingHandoff()


@pytest.fixture
def core(handoff):
    c = Core(frame_class=FakeFrame, handoff=handoff)
    c.pages = [Page('1', 'cat', 'concatenate files'),
               Page('1', 'ls', 'list directory contents'),
               Page('3', 'printf', 'formatted output conversion')]
    yield c
    c.io_selector.close()


@pytest.fixture
def started(core, handoff):
    core.bookmarks.append(Bookmark('1', 'ls', '10'))
    core.start()
    handoff.frame = core.frame
    return core


@pytest.fixture
def wm(started):
    return started.windows
