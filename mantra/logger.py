# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

MAX_MESSAGES = 1000


class Logger(object):
    def __init__(self):
        self.messages = []

    def log(self, msg):
        if (len(self.messages) >= MAX_MESSAGES):
            self.messages.pop(0)
        self.messages.append(msg)

    def clear(self):
        self.messages = []
