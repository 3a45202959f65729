# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from mantra.colors import INTENT_BOOKMARK_HIGHLIGHT, INTENT_NORMAL, INTENT_PAGE_HIGHLIGHT
from mantra.pages import Bookmark
from mantra.util import clean_line, minmax
from mantra.windows.pane import Pane, ROLE_BOOKMARKS, ROLE_PAGES, ROLE_HELPBAR

HELP_TEXT = '<tab> switch  <enter> open  b bookmark  d delete  q quit'


class ListPane(Pane):
    """
    A bordered, scrolling list with one selected row.
    """

    can_be_active = True
    title = ''
    highlight = INTENT_NORMAL

    def __init__(self, manager):
        super(ListPane, self).__init__(manager)
        self.selected = 0
        self.offset = 0

    @property
    def core(self):
        return self.manager.core

    def items(self):
        raise NotImplementedError()

    def format_item(self, item):
        raise NotImplementedError()

    def open_item(self, item):
        pass

    def selected_item(self):
        items = self.items()
        return items[self.selected] if items else None

    @property
    def visible_rows(self):
        return max(0, self.rows - 2)

    def _clamp(self):
        count = len(self.items())
        self.selected = minmax(0, self.selected, max(0, count - 1))
        if self.selected < self.offset:
            self.offset = self.selected
        elif self.visible_rows and self.selected >= self.offset + self.visible_rows:
            self.offset = self.selected - self.visible_rows + 1

    def on_resize(self):
        self._clamp()

    def move(self, delta):
        self.selected += delta
        self._clamp()

    def draw(self):
        self._clamp()
        items = self.items()
        width = self.cols - 2
        for row in range(self.visible_rows):
            index = self.offset + row
            text = self.format_item(items[index]) if index < len(items) else ''
            intent = self.highlight if index == self.selected and items else INTENT_NORMAL
            self.surface.insert_string(row + 1, 1, clean_line(text, width), intent)
        self.manager.draw_border(self)
        self.surface.add_string(0, 1, (' %s ' % self.title)[:max(0, width)])

    def input(self, keychord):
        if keychord == '<up>' or keychord == 'k':
            self.move(-1)
        elif keychord == '<down>' or keychord == 'j':
            self.move(1)
        elif keychord == '<pgup>':
            self.move(-max(1, self.visible_rows))
        elif keychord == '<pgdown>':
            self.move(max(1, self.visible_rows))
        elif keychord == '<home>':
            self.move(-self.selected)
        elif keychord == '<end>':
            self.move(len(self.items()))
        elif keychord == '<enter>':
            item = self.selected_item()
            if item:
                self.open_item(item)
        else:
            self.handle_key(keychord)

    def handle_key(self, keychord):
        self.core.message('Unknown key: %s' % keychord, show_log=False)

    def _open(self, section, name, line):
        exit_code = self.manager.open_page(section, name, line)
        if exit_code != 0:
            self.core.message('Could not open %s(%s), exit status %s.'
                              % (name, section or '', exit_code))


class BookmarksPane(ListPane):
    role = ROLE_BOOKMARKS
    title = 'Bookmarks'
    highlight = INTENT_BOOKMARK_HIGHLIGHT

    def items(self):
        return self.core.bookmarks

    def format_item(self, bookmark):
        text = '%s(%s)' % (bookmark.name, bookmark.section or '')
        if bookmark.line is not None:
            text += ':%s' % bookmark.line
        return text

    def open_item(self, bookmark):
        self._open(bookmark.section, bookmark.name, bookmark.line)

    def handle_key(self, keychord):
        if keychord == 'd' and self.core.bookmarks:
            bookmark = self.core.bookmarks.pop(self.selected)
            self._clamp()
            self.core.message('Deleted bookmark %s.' % self.format_item(bookmark))
        else:
            super(BookmarksPane, self).handle_key(keychord)


class PagesPane(ListPane):
    role = ROLE_PAGES
    title = 'Pages'
    highlight = INTENT_PAGE_HIGHLIGHT

    def items(self):
        return self.core.pages

    def format_item(self, page):
        return '%s(%s) - %s' % (page.name, page.section, page.description)

    def open_item(self, page):
        self._open(page.section, page.name, None)

    def handle_key(self, keychord):
        page = self.selected_item()
        if keychord == 'b' and page:
            bookmark = Bookmark(page.section, page.name, None)
            if bookmark not in self.core.bookmarks:
                self.core.bookmarks.append(bookmark)
            self.core.message('Bookmarked %s(%s).' % (page.name, page.section))
        else:
            super(PagesPane, self).handle_key(keychord)


class HelpBarPane(Pane):
    role = ROLE_HELPBAR

    def draw(self):
        left = HELP_TEXT
        right = self.manager.core.last_message.split('\n', 1)[0]
        space = self.cols - len(left) - len(right)
        if space < 1:
            line = clean_line(right or left, self.cols)
        else:
            line = left + ' ' * space + right
        self.surface.insert_string(0, 0, line)


PANE_CLASSES = {
    ROLE_BOOKMARKS: BookmarksPane,
    ROLE_PAGES:     PagesPane,
    ROLE_HELPBAR:   HelpBarPane,
}
