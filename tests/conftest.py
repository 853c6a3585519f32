from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / 'data'


@pytest.fixture
def sample_conf() -> Path:
    return DATA_DIR / 'config_test.conf'


@pytest.fixture
def write_conf(tmp_path):
    """Write raw bytes (or utf-8 text) into a temporary .conf file."""
    def _write(content, name='test.conf'):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode('utf-8')
        path.write_bytes(content)
        return path
    return _write
