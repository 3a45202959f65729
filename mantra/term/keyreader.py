# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import curses
import re

EVT_RESIZE = 'key_resize'

KEYCHORD_MAP = {
    'C-m':        '<enter>',
    'C-j':        '<enter>',
    'C-i':        '<tab>'
}

KEYNAME_MAP = {
    'KEY_HOME':      '<home>',
    'KEY_END':       '<end>',
    'KEY_NPAGE':     '<pgdown>',
    'KEY_PPAGE':     '<pgup>',
    'KEY_DC':        '<del>',
    'KEY_BTAB':      'S-<tab>',
    'KEY_ENTER':     '<enter>',
    'KEY_BACKSPACE': '<backspace>',
    'KEY_UP':        '<up>',
    'KEY_DOWN':      '<down>',
    'KEY_LEFT':      '<left>',
    'KEY_RIGHT':     '<right>',
}

KEY_FN_PATTERN = re.compile(r'KEY_F\((\d+)\)')


def translate_keyname(keyname, meta=False):
    if keyname.startswith('^') and len(keyname) > 1:
        return 'C-' + translate_keyname(keyname[1:], meta=meta)
    elif meta:
        return 'M-' + translate_keyname(keyname)

    fn_match = KEY_FN_PATTERN.match(keyname)
    if fn_match:
        return '<f%s>' % fn_match.group(1)

    return KEYNAME_MAP.get(keyname, keyname.lower())


def translate_keychord(keyname, meta=False):
    mkeys = translate_keyname(keyname, meta)
    return KEYCHORD_MAP.get(mkeys, mkeys)


def read_keychord(screen, timeout=0):
    key = screen.getch()
    if key == -1:
        return None
    if key == 27:
        try:
            screen.timeout(0)
            key = screen.getch()
            if key == -1:
                return '<esc>'
            return translate_keychord(curses.keyname(key).decode('utf-8'),
                                      meta=True)
        finally:
            screen.timeout(timeout)
    keyname = curses.keyname(key).decode('utf-8')
    if len(keyname) == 1:
        return keyname
    return translate_keychord(keyname)
