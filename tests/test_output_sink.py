"""
Tests for output_sink module
"""
import pytest

from config_generator.errors import WriteError
from config_generator.output_sink import ChartDirectorySink, MemorySink, OutputSink


class TestChartDirectorySink:
    """Test writing chart files to a directory"""

    def test_layout(self, tmp_path):
        """Test destination ids resolve to the chart layout"""
        sink = ChartDirectorySink(tmp_path / 'helm')

        assert sink.path_for('values') == tmp_path / 'helm' / 'values.yaml'
        assert sink.path_for('chart') == tmp_path / 'helm' / 'Chart.yaml'
        assert sink.path_for('deployment') == tmp_path / 'helm' / 'templates' / 'deployment.yaml'

    def test_write_creates_directories(self, tmp_path):
        """Test missing directories are created"""
        sink = ChartDirectorySink(tmp_path / 'helm')
        sink.write('service', 'kind: Service\n')
        sink.write('values', 'service: {}\n')

        assert (tmp_path / 'helm' / 'templates' / 'service.yaml').read_text() == 'kind: Service\n'
        assert (tmp_path / 'helm' / 'values.yaml').read_text() == 'service: {}\n'

    def test_write_replaces_existing_file(self, tmp_path):
        """Test a second write replaces the file content"""
        sink = ChartDirectorySink(tmp_path)
        sink.write('values', 'first\n')
        sink.write('values', 'second\n')

        assert (tmp_path / 'values.yaml').read_text() == 'second\n'

    def test_unknown_destination(self, tmp_path):
        """Test destinations outside the chart layout are rejected"""
        sink = ChartDirectorySink(tmp_path)

        with pytest.raises(WriteError, match='Unknown output destination'):
            sink.write('../escape', 'x')

    def test_os_error_is_wrapped(self, tmp_path):
        """Test filesystem failures raise WriteError"""
        blocker = tmp_path / 'helm'
        blocker.write_text('a file where the chart directory should be')
        sink = ChartDirectorySink(blocker)

        with pytest.raises(WriteError, match='Failed to write'):
            sink.write('values', 'x')


    def test_prune_removes_stale_templates(self, tmp_path):
        """Test resource templates missing from the current run are deleted"""
        sink = ChartDirectorySink(tmp_path)
        sink.write('ingress', 'kind: Ingress\n')
        sink.write('service', 'kind: Service\n')
        (tmp_path / 'templates' / 'custom.yaml').write_text('kept')

        removed = sink.prune(['values', 'service'])

        assert removed == ['ingress']
        assert not (tmp_path / 'templates' / 'ingress.yaml').exists()
        assert (tmp_path / 'templates' / 'service.yaml').exists()
        assert (tmp_path / 'templates' / 'custom.yaml').exists()

    def test_prune_without_templates_dir(self, tmp_path):
        """Test pruning a fresh directory is a no-op"""
        assert ChartDirectorySink(tmp_path / 'helm').prune([]) == []


class TestOutputSink:
    """Test the sink interface"""

    def test_interface_is_abstract(self):
        """Test the base class cannot be instantiated"""
        with pytest.raises(TypeError):
            OutputSink()

    def test_incomplete_subclass(self):
        """Test a sink must implement write and prune"""
        class WriteOnlySink(OutputSink):
            def write(self, destination_id, content):
                pass

        with pytest.raises(TypeError):
            WriteOnlySink()


class TestMemorySink:
    """Test the in-memory sink"""

    def test_records_files_in_order(self):
        """Test content and write order are kept"""
        sink = MemorySink()
        sink.write('values', 'a')
        sink.write('ingress', 'b')

        assert sink.files == {'values': 'a', 'ingress': 'b'}
        assert sink.order == ['values', 'ingress']

    def test_unknown_destination(self):
        """Test unknown ids are rejected like the directory sink"""
        with pytest.raises(WriteError):
            MemorySink().write('configmap', 'x')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
