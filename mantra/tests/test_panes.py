from mantra.colors import INTENT_BOOKMARK_HIGHLIGHT, INTENT_PAGE_HIGHLIGHT
from mantra.pages import Bookmark, Page, parse_whatis
from mantra.panes import HELP_TEXT
from mantra.windows import ROLE_BOOKMARKS, ROLE_PAGES, ROLE_HELPBAR


def rows_written(surface, intent=None):
    return [w for w in surface.writes if intent is None or w[3] == intent]


class TestPagesPane:
    def test_draw_highlights_selection(self, wm):
        pages = wm.pane(ROLE_PAGES)
        pages.move(1)
        pages.surface.writes = []
        wm.draw_all()
        highlighted = rows_written(pages.surface, INTENT_PAGE_HIGHLIGHT)
        assert len(highlighted) == 1
        row, col, text, _ = highlighted[0]
        assert (row, col) == (2, 1)
        assert text.startswith('ls(1) - list directory contents')
        assert len(text) == pages.cols - 2

    def test_selection_is_clamped(self, wm):
        pages = wm.pane(ROLE_PAGES)
        pages.move(-5)
        assert pages.selected == 0
        pages.move(50)
        assert pages.selected == 2

    def test_selection_scrolls_into_view(self, wm):
        pages = wm.pane(ROLE_PAGES)
        wm.core.pages = [Page('1', 'p%d' % i, '') for i in range(100)]
        wm.layout(pages, 24, 0, 10, 40)
        pages.move(20)
        assert pages.offset == 20 - pages.visible_rows + 1
        pages.move(-20)
        assert pages.offset == 0

    def test_enter_opens_page_at_top(self, wm, handoff):
        pages = wm.pane(ROLE_PAGES)
        pages.input('<enter>')
        assert handoff.calls == [(['man', '--pager=less', '1', 'cat'], '0g')]

    def test_bookmark_selected_page(self, wm):
        pages = wm.pane(ROLE_PAGES)
        pages.move(2)
        pages.input('b')
        pages.input('b')
        assert wm.core.bookmarks == [Bookmark('1', 'ls', '10'),
                                     Bookmark('3', 'printf', None)]
        assert wm.core.last_message == 'Bookmarked printf(3).'

    def test_failed_open_is_reported(self, wm, handoff):
        handoff.exit_code = 16
        wm.pane(ROLE_PAGES).input('<enter>')
        assert 'exit status 16' in wm.core.last_message

    def test_unknown_key(self, wm):
        wm.pane(ROLE_PAGES).input('z')
        assert wm.core.last_message == 'Unknown key: z'


class TestBookmarksPane:
    def test_enter_opens_at_bookmarked_line(self, wm, handoff):
        wm.pane(ROLE_BOOKMARKS).input('<enter>')
        assert handoff.calls == [(['man', '--pager=less', '1', 'ls'], '10g')]

    def test_draw(self, wm):
        bookmarks = wm.pane(ROLE_BOOKMARKS)
        bookmarks.surface.writes = []
        wm.draw_all()
        highlighted = rows_written(bookmarks.surface, INTENT_BOOKMARK_HIGHLIGHT)
        assert [w[2].rstrip() for w in highlighted] == ['ls(1):10']

    def test_delete(self, wm):
        bookmarks = wm.pane(ROLE_BOOKMARKS)
        bookmarks.input('d')
        assert wm.core.bookmarks == []
        bookmarks.input('<enter>')
        bookmarks.input('d')
        assert bookmarks.selected == 0


class TestHelpBarPane:
    def test_draw_shows_help_and_message(self, wm):
        helpbar = wm.pane(ROLE_HELPBAR)
        wm.core.message('Hello')
        helpbar.surface.writes = []
        helpbar.draw()
        (row, col, text, _), = helpbar.surface.writes
        assert (row, col) == (0, 0)
        assert text.startswith(HELP_TEXT)
        assert text.endswith('Hello')
        assert len(text) == 80

    def test_narrow_terminal(self, wm):
        helpbar = wm.pane(ROLE_HELPBAR)
        wm.layout(helpbar, 0, 23, 1, 10)
        helpbar.surface.writes = []
        helpbar.draw()
        assert len(helpbar.surface.writes[0][2]) == 10


class TestParseWhatis:
    def test_parse(self):
        output = ('ls (1)               - list directory contents\n'
                  'printf, fprintf (3)  - formatted output conversion\n'
                  'garbage\n'
                  'passwd (5ssl) - password file\n')
        assert list(parse_whatis(output)) == [
            Page('1', 'ls', 'list directory contents'),
            Page('3', 'printf', 'formatted output conversion'),
            Page('5ssl', 'passwd', 'password file'),
        ]
