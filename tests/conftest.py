import shutil
from pathlib import Path

import pytest

from safari_appgroups.config import PostConvertConfig

FIXTURE_PBXPROJ = Path(__file__).parent / 'fixtures' / 'project.pbxproj'


@pytest.fixture
def pbxproj_text():
    return FIXTURE_PBXPROJ.read_text(encoding='utf-8')


@pytest.fixture
def config(tmp_path):
    return PostConvertConfig(project_dir=tmp_path / 'extension-safari-xcode' / 'BewlyCat')


@pytest.fixture
def converted_project(config):
    """Lay out the tree the Safari web extension converter generates."""
    config.app_dir.mkdir(parents=True)
    config.extension_dir.mkdir(parents=True)
    config.xcodeproj_path.mkdir(parents=True)
    shutil.copyfile(FIXTURE_PBXPROJ, config.pbxproj_path)
    return config
