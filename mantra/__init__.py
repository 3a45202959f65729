# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from mantra.core import Core, RunloopExit
from mantra.errors import MantraException, TerminalException, PaneInputError, ColorException
from mantra.pages import Bookmark, Page

__version__ = '0.1.0'

__all__ = [
    'Core',
    'RunloopExit',
    'MantraException',
    'TerminalException',
    'PaneInputError',
    'ColorException',
    'Bookmark',
    'Page',
]
