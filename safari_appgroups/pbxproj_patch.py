"""
Text patches for project.pbxproj that wire the entitlements files into the
app and extension targets.

The descriptor is handled as a plain string. Insertions are anchored on markers
the Safari web extension converter always emits.
"""
import random
import re

FILE_REF_END_MARKER = '/* End PBXFileReference section */'
ENTITLEMENTS_FILE_TYPE = 'text.plist.entitlements'


def generate_id():
    """Generate a 24-character hex id like Xcode uses."""
    return ''.join(random.choices('0123456789ABCDEF', k=24))


def _quote(value):
    if re.fullmatch(r'[A-Za-z0-9_./$-]+', value):
        return value
    return '"{}"'.format(value)


def line_ending(content):
    return '\r\n' if '\r\n' in content else '\n'


def is_patched(content, config):
    return config.app_entitlements_name in content


def _file_reference(ref, name, newline):
    return ('\t\t{ref} /* {name} */ = {{isa = PBXFileReference; lastKnownFileType = {file_type}; '
            'path = {path}; sourceTree = "<group>"; }};{newline}').format(
                ref=ref, name=name, file_type=ENTITLEMENTS_FILE_TYPE, path=_quote(name), newline=newline)


def _add_file_references(content, config, app_ref, ext_ref, newline):
    addition = (_file_reference(app_ref, config.app_entitlements_name, newline)
                + _file_reference(ext_ref, config.extension_entitlements_name, newline)
                + FILE_REF_END_MARKER)
    return content.replace(FILE_REF_END_MARKER, addition, 1)


def _add_code_sign_entitlements(content, bundle_identifier, followers, entitlements_path):
    pattern = re.compile(r'(PRODUCT_BUNDLE_IDENTIFIER = {};)(\s+)({})'.format(
        re.escape(bundle_identifier), '|'.join(followers)))
    setting = 'CODE_SIGN_ENTITLEMENTS = {};'.format(_quote(entitlements_path))

    def insert(match):
        return match.group(1) + match.group(2) + setting + match.group(2) + match.group(3)

    return pattern.sub(insert, content)


def _add_group_child(content, group_name, ref, file_name, newline):
    # First matching group only
    pattern = re.compile(r'(/\* {} \*/ = \{{\s*isa = PBXGroup;\s*children = \()'.format(re.escape(group_name)))
    child = '{}\t\t\t\t{} /* {} */,'.format(newline, ref, file_name)
    return pattern.sub(lambda match: match.group(1) + child, content, count=1)


def patch_pbxproj_text(content, config, app_ref=None, ext_ref=None):
    app_ref = app_ref or generate_id()
    ext_ref = ext_ref or generate_id()
    newline = line_ending(content)

    # 1. File references
    content = _add_file_references(content, config, app_ref, ext_ref, newline)

    # 2. CODE_SIGN_ENTITLEMENTS in every matching build configuration
    content = _add_code_sign_entitlements(
        content, config.bundle_identifier, ('PRODUCT_NAME', 'REGISTER_APP_GROUPS'),
        '{}/{}'.format(config.product_name, config.app_entitlements_name))
    content = _add_code_sign_entitlements(
        content, config.extension_bundle_identifier, ('PRODUCT_NAME', 'SKIP_INSTALL'),
        '{}/{}'.format(config.extension_name, config.extension_entitlements_name))

    # 3. Group membership
    content = _add_group_child(content, config.product_name, app_ref, config.app_entitlements_name, newline)
    content = _add_group_child(content, config.extension_name, ext_ref, config.extension_entitlements_name, newline)

    return content


def update_pbxproj(config):
    pbxproj_path = config.pbxproj_path
    # newline='' keeps CRLF descriptors byte for byte
    with open(pbxproj_path, encoding='utf-8', newline='') as f:
        content = f.read()

    if is_patched(content, config):
        print('[!] Entitlements already configured in {}'.format(pbxproj_path.name))
        return False

    with open(pbxproj_path, 'w', encoding='utf-8', newline='') as f:
        f.write(patch_pbxproj_text(content, config))
    print('[+] Updated: {}'.format(pbxproj_path))
    return True
