from __future__ import annotations

from pathlib import Path

import pytest

_DIRECTORY_MARKERS = ("unit", "integration")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    tests_dir = (Path(config.rootpath) / "tests").resolve()

    for item in items:
        item_path = Path(str(item.path)).resolve()
        for marker in _DIRECTORY_MARKERS:
            if (tests_dir / marker) in item_path.parents:
                item.add_marker(getattr(pytest.mark, marker))
