# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
The IOSelector class provides an abstraction on the select syscall.
"""

import os
import select

BUFFER_SIZE = 1024


class IOSelector(object):
    """
    The IOSelector class provides an abstraction on the select syscall.

    This class keeps a list of waitables as defined in the select
    documentation, as well as a handler for each waitable. A handler must
    be a callable with the signature ``fn(waitable)`` to process the waitable.

    In order to execute asynchronuous events on the thread that calls select,
    an IOSelector object provides a self-pipe. Handlers for such events may
    be registered and unregistered by the register_async and unregister_async
    calls respectively. If an event, identified by a provided string is
    dispatched by calling post_async_event, the corresponding handler function
    will be invoked on select. Names must not contain line-breaks, as these
    are used as separators for events on the pipe. This makes it safe to
    post events from signal handlers.
    """

    def __init__(self, timeout=None):
        self._timeout = timeout
        self._waitables = []
        self._handlers = {}
        self._async_handlers = {}

        # Initialize self-pipe to handle async events
        self._fd_read, self._fd_write = os.pipe()
        os.set_blocking(self._fd_read, False)
        self.register(self._fd_read, self._process_async_event)

    def register(self, waitable, handler):
        self._waitables.append(waitable)
        self._handlers[id(waitable)] = handler

    def unregister(self, waitable):
        if waitable not in self._waitables:
            return
        self._waitables.remove(waitable)
        del self._handlers[id(waitable)]

    def select(self):
        readables, _, _ = select.select(self._waitables, [], [], self._timeout)
        for waitable in readables:
            # A handler may have unregistered a later waitable
            handler = self._handlers.get(id(waitable))
            if handler:
                handler(waitable)

    def register_async(self, name, handler):
        if '\n' in name:
            raise ValueError('Line-breaks not allowed in async-handler names.')
        self._async_handlers[name] = handler

    def unregister_async(self, name):
        self._async_handlers.pop(name, None)

    def post_async_event(self, name):
        os.write(self._fd_write, ('%s\n' % name).encode('utf-8'))

    def _read_async_events(self):
        data = b''
        while True:
            try:
                chunk = os.read(self._fd_read, BUFFER_SIZE)
            except BlockingIOError:
                return data
            if not chunk:
                return data
            data += chunk

    def _process_async_event(self, _):
        # Drain the pipe, several events may be pending
        for name in self._read_async_events().decode('utf-8').split('\n'):
            if name in self._async_handlers:
                self._async_handlers[name](name)

    def close(self):
        os.close(self._fd_read)
        os.close(self._fd_write)
