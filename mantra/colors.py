# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module defines the color intents used to draw panes.

A color intent is a fixed pairing of a foreground and a background
color, referenced by name rather than by color value:

- normal: borders of inactive panes and regular text
- active: border of the active pane
- bookmark_highlight: the selected row in the bookmark list
- page_highlight: the selected row in the page list

The set of intents and their colors is fixed for the lifetime of
the process. Terminal implementations map each intent to one of
their color pairs when the frame is initialized.
"""

from mantra.errors import ColorException

INTENT_NORMAL             = 'normal'
INTENT_ACTIVE             = 'active'
INTENT_BOOKMARK_HIGHLIGHT = 'bookmark_highlight'
INTENT_PAGE_HIGHLIGHT     = 'page_highlight'

COLOR_NAMES = ('black', 'red', 'green', 'yellow',
               'blue', 'magenta', 'cyan', 'white')

# Order matters: the position is the color pair index, and pair 0
# is the terminal default that can not be redefined.
INTENTS = (
    (INTENT_NORMAL,             ('white', 'black')),
    (INTENT_ACTIVE,             ('green', 'black')),
    (INTENT_BOOKMARK_HIGHLIGHT, ('blue',  'black')),
    (INTENT_PAGE_HIGHLIGHT,     ('green', 'black')),
)


def intent_names():
    return [name for name, _ in INTENTS]


def intent_index(intent):
    for index, (name, _) in enumerate(INTENTS):
        if name == intent:
            return index
    raise ColorException('No color intent named %s.' % intent)


def intent_colors(intent):
    foreground, background = INTENTS[intent_index(intent)][1]
    for color in (foreground, background):
        if color not in COLOR_NAMES:
            raise ColorException('No color named %s' % color)
    return foreground, background
