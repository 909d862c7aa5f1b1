#!/usr/bin/env python3

import sys

from pbxproj import XcodeProject

from safari_appgroups.config import PostConvertConfig
from safari_appgroups.entitlements import create_entitlements_files
from safari_appgroups.pbxproj_patch import update_pbxproj


def target_entitlements(project, target):
    """Map each build configuration of ``target`` to its CODE_SIGN_ENTITLEMENTS."""
    settings = {}
    objects = project.objects
    for target_object in objects.get_targets(target):
        buildConfiguration_list_object = objects[target_object["buildConfigurationList"]]
        for buildConfiguration_pointer in buildConfiguration_list_object["buildConfigurations"]:
            build_configuration_object = objects[buildConfiguration_pointer]
            build_settings = build_configuration_object["buildSettings"]
            settings[build_configuration_object["name"]] = getattr(build_settings, "CODE_SIGN_ENTITLEMENTS", None)
    return settings


def report_entitlements(config):
    project = XcodeProject.load(str(config.pbxproj_path))
    report = {}
    for target in (x.name for x in project.objects.get_targets()):
        report[target] = target_entitlements(project, target)
        for configuration, entitlements in report[target].items():
            print('[+] {} ({}): {}'.format(target, configuration, entitlements or '-'))
    return report


def main(config=None):
    config = config or PostConvertConfig()
    print('[*] Safari post-convert: Adding App Groups entitlements...\n')

    if not config.pbxproj_path.is_file():
        print('[-] Xcode project not found at {}'.format(config.project_dir), file=sys.stderr)
        print('    Run "pnpm convert-safari" first.', file=sys.stderr)
        return 1

    try:
        create_entitlements_files(config)
        update_pbxproj(config)
    except Exception as error:
        print('[-] Error: {}'.format(error), file=sys.stderr)
        return 1

    if config.verify:
        # Read-back problems are warnings, the patch is already on disk
        try:
            report_entitlements(config)
        except Exception as error:
            print('[!] Could not read back {}: {}'.format(config.pbxproj_path, error), file=sys.stderr)
            print('    Check the project opens in Xcode before building.', file=sys.stderr)

    print('\n[+] Safari post-convert completed!')
    print('    App Group: {}'.format(config.app_group))
    print('\n[*] Next steps:')
    print('    1. Open Xcode project: {}'.format(config.xcodeproj_path))
    print('    2. Configure App Groups in Apple Developer Portal:')
    print('       - Register App Group: {}'.format(config.app_group))
    print('       - Enable App Groups capability for both App IDs')
    print('    3. In Xcode, verify Signing & Capabilities shows App Groups')
    return 0


if __name__ == '__main__':
    sys.exit(main())
