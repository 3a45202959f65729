# mantra init file
#
# This file is loaded on every start. If it defines a function
# init(core), it is called before the terminal is set up.

from mantra.pages import Bookmark


def init(core):
    # Pager invocation: <command> <flag> <section> <page>
    core.set_variable(['pager', 'command'], 'man')
    core.set_variable(['pager', 'flag'], '--pager=less')

    # Width of the bookmark list as a fraction of the terminal
    core.set_variable(['layout', 'bookmarks-width'], 0.3)

    # Bookmarks to show on startup
    # core.bookmarks.append(Bookmark('1', 'ls', None))
