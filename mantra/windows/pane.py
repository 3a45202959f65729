# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from mantra.errors import PaneInputError

ROLE_BOOKMARKS = 'bookmarks'
ROLE_PAGES     = 'pages'
ROLE_HELPBAR   = 'helpbar'

ROLES = (ROLE_BOOKMARKS, ROLE_PAGES, ROLE_HELPBAR)


class Pane(object):
    """
    A rectangular region of the terminal with a fixed role.

    Geometry is owned by the WindowManager, which updates ``x``, ``y``,
    ``rows`` and ``cols`` during layout and before each redraw.
    Subclasses implement ``draw`` and, if they can become active,
    ``input``. ``on_resize`` is optional and is called after every
    layout of the pane when set.
    """

    role = None
    can_be_active = False
    on_resize = None

    def __init__(self, manager):
        self.manager = manager
        self.surface = None
        self.x = 0
        self.y = 0
        self.rows = 0
        self.cols = 0

    @property
    def dimensions(self):
        return (self.rows, self.cols, self.y, self.x)

    def draw(self):
        raise NotImplementedError()

    def input(self, keychord):
        raise PaneInputError(self, keychord)

    def __str__(self):
        return ('#<pane "%s" dimensions=%s>'
                % (self.role, str(self.dimensions)))
