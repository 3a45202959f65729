# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the classes that divide the terminal into panes.

The terminal is split into three panes with fixed roles: the bookmark
list, the page list and the help bar. Their order is fixed and is the
order in which <tab> cycles through them. Exactly one pane is active
at any time and receives keyboard input; the help bar can never be
active.

The WindowManager owns the panes, lays them out whenever the terminal
size changes, dispatches drawing and input, and hands the terminal to
the pager when a page is opened.
"""

from mantra.windows.manager import WindowManager
from mantra.windows.pane import Pane, ROLES, ROLE_BOOKMARKS, ROLE_PAGES, ROLE_HELPBAR
