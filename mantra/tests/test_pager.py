import pytest

from mantra import pager
from mantra.handoff import EXIT_SPAWN_FAILED


class TestJumpCommand:
    def test_line(self):
        assert pager.jump_command('42') == '42g'

    def test_integer_line(self):
        assert pager.jump_command(7) == '7g'

    def test_no_line_jumps_to_top(self):
        assert pager.jump_command(None) == '0g'
        assert pager.jump_command() == '0g'


class TestBuildCommand:
    def test_section_and_page(self):
        assert pager.build_command('1', 'ls') == ['man', '--pager=less', '1', 'ls']

    def test_missing_section_becomes_empty(self):
        assert pager.build_command(None, 'ls') == ['man', '--pager=less', '', 'ls']

    def test_custom_command(self):
        assert pager.build_command('3', 'printf', 'woman', '-P') == \
            ['woman', '-P', '3', 'printf']


class TestOpenPage:
    def _record_clear_all(self, wm, frame):
        clear_all = wm.clear_all

        def _clear_all():
            frame.calls.append('clear_all')
            clear_all()
        wm.clear_all = _clear_all

    def test_handoff_sequence(self, started, handoff):
        wm, frame = started.windows, started.frame
        frame.calls = []
        self._record_clear_all(wm, frame)

        assert wm.open_page('1', 'ls', '10') == 0

        assert handoff.calls == [(['man', '--pager=less', '1', 'ls'], '10g')]
        assert frame.calls == ['suspend', 'run', 'resume', 'refresh', 'clear_all']
        assert frame.owned_by_ui()

    def test_no_line_starts_at_top(self, started, handoff):
        started.windows.open_page(None, 'ls')
        assert handoff.calls == [(['man', '--pager=less', '', 'ls'], '0g')]

    @pytest.mark.parametrize('exit_code', [1, 16, EXIT_SPAWN_FAILED])
    def test_exit_code_is_passed_through(self, started, handoff, exit_code):
        handoff.exit_code = exit_code
        assert started.windows.open_page('1', 'nosuchpage', None) == exit_code
        assert started.frame.owned_by_ui()

    def test_configured_pager(self, started, handoff):
        started.set_variable(['pager', 'command'], 'woman')
        started.set_variable(['pager', 'flag'], '--pager=most')
        started.windows.open_page('5', 'passwd')
        assert handoff.calls[0][0] == ['woman', '--pager=most', '5', 'passwd']

    def test_terminal_taken_back_when_handoff_fails(self, started):
        def broken_handoff(argv, initial_input):
            raise RuntimeError('boom')

        started.windows._handoff = broken_handoff
        with pytest.raises(RuntimeError):
            started.windows.open_page('1', 'ls')
        assert started.frame.owned_by_ui()

    def test_clear_all_after_return_uses_live_size(self, started):
        wm = started.windows
        pages = wm.panes[1]
        pages.surface.writes = []
        pages.surface.resize(4, 10)

        wm.open_page('1', 'ls')

        assert [w[0] for w in pages.surface.writes] == [0, 1, 2, 3]
