# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import re
import subprocess

Page = collections.namedtuple('Page', ['section', 'name', 'description'])
Bookmark = collections.namedtuple('Bookmark', ['section', 'name', 'line'])

# whatis format: "name[, alias...] (section) - description"
WHATIS_RE = re.compile(r'^(.+?)\s*\(([^)]+)\)\s*-+\s*(.*)$')


def parse_whatis(output):
    for line in output.split('\n'):
        match = WHATIS_RE.match(line.strip())
        if match:
            yield Page(match.group(2),
                       match.group(1).split(',')[0].strip(),
                       match.group(3).strip())


def list_pages(command='man'):
    """
    Return all pages known to the man database, sorted by name.

    Raises OSError or CalledProcessError if ``command -k`` can not be run.
    """
    output = subprocess.check_output([command, '-k', '.'],
                                     stderr=subprocess.DEVNULL) \
                       .decode('utf-8', 'replace')
    return sorted(set(parse_whatis(output)), key=lambda p: (p.name, p.section))
