# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class MantraException(Exception):
    pass


class TerminalException(MantraException):
    """
    The terminal could not be set up, handed over or taken back.

    There is no way to continue once this is raised, the terminal
    may be left in an undefined state.
    """
    pass


class PaneInputError(MantraException):
    """Input was routed to a pane that does not take input."""

    def __init__(self, pane, keychord):
        super(PaneInputError, self).__init__(
            'Pane %s does not take input (received %r).' % (pane.role, keychord))
        self.pane = pane
        self.keychord = keychord


class ColorException(MantraException):
    pass
