"""
Tests for output sinks.

Tests the callback and file-append completion modes.
"""

from unittest.mock import Mock, call

from src.harammo.convert.sink import CallbackSink, FileSink, make_sink


class TestCallbackSink:
    """Test suite for CallbackSink."""

    def test_each_block_passed_to_callback(self):
        callback = Mock()
        sink = CallbackSink(callback)

        sink.prepare()
        sink.deliver('first')
        sink.deliver('second')

        assert callback.call_args_list == [call(None, 'first'), call(None, 'second')]


class TestFileSink:
    """Test suite for FileSink."""

    def test_prepare_truncates_existing_file(self, tmp_path):
        output = tmp_path / 'ammo.txt'
        output.write_text('stale content', encoding='utf-8')

        FileSink(str(output)).prepare()

        assert output.read_text(encoding='utf-8') == ''

    def test_prepare_creates_parent_directories(self, tmp_path):
        output = tmp_path / 'out' / 'nested' / 'ammo.txt'

        FileSink(str(output)).prepare()

        assert output.exists()

    def test_blocks_appended_in_order(self, tmp_path):
        output = tmp_path / 'ammo.txt'
        callback = Mock()
        sink = FileSink(str(output), callback)

        sink.prepare()
        sink.deliver('one\n')
        sink.deliver('two\n')

        assert output.read_text(encoding='utf-8') == 'one\ntwo\n'
        assert callback.call_args_list == [call(None), call(None)]

    def test_utf8_written(self, tmp_path):
        output = tmp_path / 'ammo.txt'
        sink = FileSink(str(output))

        sink.prepare()
        sink.deliver('Zoë ☃\n')

        assert output.read_bytes() == 'Zoë ☃\n'.encode('utf-8')


class TestMakeSink:
    """Test suite for make_sink()."""

    def test_without_output_path(self):
        assert isinstance(make_sink(None, Mock()), CallbackSink)

    def test_with_output_path(self, tmp_path):
        sink = make_sink(str(tmp_path / 'ammo.txt'), Mock())

        assert isinstance(sink, FileSink)
