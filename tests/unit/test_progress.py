from __future__ import annotations

from unittest.mock import Mock, patch

from csvrecord.services.progress import RowProgress, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestRowProgress:
    """Test cases for RowProgress class."""

    def test_init_with_tty_enabled(self):
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=True), \
             patch('csvrecord.services.progress.tqdm') as mock_tqdm:

            progress = RowProgress(5, description="Rows")

            assert progress.total_rows == 5
            assert progress.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Rows",
                unit="row",
                leave=True,
                ncols=80,
                ascii=True,
                mininterval=0.5,
            )

    def test_init_with_tty_disabled(self):
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=False), \
             patch('csvrecord.services.progress.tqdm') as mock_tqdm:
            progress = RowProgress(5)
            assert progress.enabled is False
            assert progress.pbar is None
            mock_tqdm.assert_not_called()

    def test_disabled_by_caller_even_on_tty(self):
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=True), \
             patch('csvrecord.services.progress.tqdm') as mock_tqdm:
            progress = RowProgress(5, enabled=False)
            assert progress.pbar is None
            mock_tqdm.assert_not_called()

    def test_advance_and_postfix(self):
        mock_pbar = Mock()
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=True), \
             patch('csvrecord.services.progress.tqdm', return_value=mock_pbar):
            progress = RowProgress(3)
            progress.advance()
            progress.advance(2)
            progress.set_postfix(failed=1)

        assert mock_pbar.update.call_args_list[0].args == (1,)
        assert mock_pbar.update.call_args_list[1].args == (2,)
        mock_pbar.set_postfix.assert_called_once_with(failed=1)

    def test_context_manager_closes(self):
        mock_pbar = Mock()
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=True), \
             patch('csvrecord.services.progress.tqdm', return_value=mock_pbar):
            with RowProgress(1) as progress:
                progress.advance()
        mock_pbar.close.assert_called_once()
        assert progress.pbar is None

    def test_disabled_operations_are_noops(self):
        with patch('csvrecord.services.progress.is_tty_enabled', return_value=False):
            with RowProgress(2) as progress:
                progress.advance()
                progress.set_postfix(failed=0)
        assert progress.pbar is None
