# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Run an interactive program on a pseudo-terminal.

The caller must have released the terminal before calling
run_interactive: the child reads the user's keystrokes and writes
directly to the terminal until it exits.
"""

import contextlib
import fcntl
import os
import pty
import select
import signal
import sys
import termios
import tty

BUFFER_SIZE = 1024

# Exit status reported when the program could not be started
EXIT_SPAWN_FAILED = 127


def _copy_window_size(from_fd, to_fd):
    try:
        size = fcntl.ioctl(from_fd, termios.TIOCGWINSZ, b'\0' * 8)
        fcntl.ioctl(to_fd, termios.TIOCSWINSZ, size)
    except OSError:
        pass  # not a tty


@contextlib.contextmanager
def _raw_mode(fd):
    if not os.isatty(fd):
        yield
        return
    mode = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, mode)


@contextlib.contextmanager
def _forward_resize(from_fd, to_fd):
    def _handle_resize_sig(_, __):
        _copy_window_size(from_fd, to_fd)

    old_handler = signal.signal(signal.SIGWINCH, _handle_resize_sig)
    try:
        yield
    finally:
        signal.signal(signal.SIGWINCH, old_handler)


def _write_all(fd, data):
    while data:
        written = os.write(fd, data)
        data = data[written:]


def _proxy(master_fd, stdin_fd, stdout_fd):
    waitables = [master_fd, stdin_fd]
    while True:
        readables, _, _ = select.select(waitables, [], [])
        if master_fd in readables:
            try:
                data = os.read(master_fd, BUFFER_SIZE)
            except OSError:
                # EIO once the child closed its side
                return
            if not data:
                return
            _write_all(stdout_fd, data)
        if stdin_fd in readables:
            data = os.read(stdin_fd, BUFFER_SIZE)
            if not data:
                waitables.remove(stdin_fd)
            else:
                try:
                    _write_all(master_fd, data)
                except OSError:
                    return


def run_interactive(argv, initial_input=None):
    """
    Run ``argv`` on a pseudo-terminal and return its exit status.

    ``initial_input`` is delivered to the program before anything the
    user types. Blocks until the program exits. A program that can not
    be started is reported as exit status 127.
    """
    stdin_fd = pty.STDIN_FILENO
    stdout_fd = pty.STDOUT_FILENO
    sys.stdout.flush()

    try:
        pid, master_fd = pty.fork()
    except OSError:
        return EXIT_SPAWN_FAILED

    if pid == 0:
        try:
            os.execvp(argv[0], argv)
        finally:
            os._exit(EXIT_SPAWN_FAILED)

    try:
        _copy_window_size(stdin_fd, master_fd)
        if initial_input:
            try:
                _write_all(master_fd, initial_input.encode('utf-8'))
            except OSError:
                pass  # child already exited, _proxy sees EIO
        with _forward_resize(stdin_fd, master_fd), _raw_mode(stdin_fd):
            _proxy(master_fd, stdin_fd, stdout_fd)
    finally:
        os.close(master_fd)
        _, status = os.waitpid(pid, 0)
    return os.waitstatus_to_exitcode(status)
