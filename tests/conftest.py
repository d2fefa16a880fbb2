from pathlib import Path
import sys

import pytest

# 未安装时也能直接从源码目录导入 optstore
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from optstore import config  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_default_store():
    config.reset()
    yield
    config.reset()
