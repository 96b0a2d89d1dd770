"""Test fixtures and utilities"""

from pathlib import Path
from typing import Mapping

import pytest
import yaml


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def minimal_config_data() -> Mapping[str, object]:
    return {"componentType": "int32", "dimension": 3}


@pytest.fixture
def kernel_config_file(tmp_path, minimal_config_data) -> Path:
    return write_config_file(folder=tmp_path, data={**minimal_config_data, "defaultNorm": "L_infty"})


#################################################################
# Other helpers
#################################################################
def write_config_file(folder: Path, data: Mapping[str, object], name: str = "dgkernel.yaml") -> Path:
    fp = folder / name
    with open(fp, "w") as fh:
        yaml.safe_dump(dict(data), fh)
    assert fp.is_file()
    return fp
