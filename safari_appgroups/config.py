from dataclasses import dataclass
from pathlib import Path

BUNDLE_IDENTIFIER = 'com.hankun.BewlyCat'
PRODUCT_NAME = 'BewlyCat'
XCODE_PROJECT_DIR = Path('./extension-safari-xcode/BewlyCat')


@dataclass
class PostConvertConfig:
    """Paths and identifiers for one converted Safari project."""

    bundle_identifier: str = BUNDLE_IDENTIFIER
    product_name: str = PRODUCT_NAME
    project_dir: Path = XCODE_PROJECT_DIR
    verify: bool = True

    def __post_init__(self):
        self.project_dir = Path(self.project_dir)

    @property
    def app_group(self):
        return 'group.{}'.format(self.bundle_identifier)

    @property
    def extension_bundle_identifier(self):
        return '{}.Extension'.format(self.bundle_identifier)

    @property
    def extension_name(self):
        return '{} Extension'.format(self.product_name)

    @property
    def app_dir(self):
        return self.project_dir / self.product_name

    @property
    def extension_dir(self):
        return self.project_dir / self.extension_name

    @property
    def xcodeproj_path(self):
        return self.project_dir / '{}.xcodeproj'.format(self.product_name)

    @property
    def pbxproj_path(self):
        return self.xcodeproj_path / 'project.pbxproj'

    @property
    def app_entitlements_name(self):
        return '{}.entitlements'.format(self.product_name)

    @property
    def extension_entitlements_name(self):
        return '{}.entitlements'.format(self.extension_name)

    @property
    def app_entitlements_path(self):
        return self.app_dir / self.app_entitlements_name

    @property
    def extension_entitlements_path(self):
        return self.extension_dir / self.extension_entitlements_name
