# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

DEFAULT_COMMAND = 'man'
DEFAULT_FLAG    = '--pager=less'

# less: <n>g jumps to line n
JUMP_SUFFIX = 'g'
JUMP_TOP    = '0' + JUMP_SUFFIX


def build_command(section, page, command=DEFAULT_COMMAND, flag=DEFAULT_FLAG):
    return [command, flag, section or '', page]


def jump_command(line=None):
    if line is None:
        return JUMP_TOP
    return '%s%s' % (line, JUMP_SUFFIX)
