# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import importlib.util
import os
import shutil
import sys

from mantra.core import Core
from mantra.util import base_directory, user_directory


def create_init_file():
    user_dir = user_directory()
    if not os.path.exists(user_dir):
        os.makedirs(user_dir)
    user_init_path = user_directory('init.py')
    if not os.path.exists(user_init_path):
        shutil.copyfile(base_directory('init.py'), user_init_path)
    return user_init_path


def load_init_file(core, path):
    spec = importlib.util.spec_from_file_location('mantra._user_init', path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    if hasattr(module, 'init'):
        module.init(core)
    return module


def main():
    core = Core()
    try:
        load_init_file(core, create_init_file())
        core.load_pages()
        core.run()
    except Exception:
        core.exception()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
