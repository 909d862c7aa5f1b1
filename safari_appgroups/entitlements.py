"""
Entitlements documents for the converted Safari app and its web extension.

Both targets get the sandbox, outgoing network access and the shared App Group,
so extension storage lands in a container that survives a system restart.
"""

_ENTITLEMENTS_TEMPLATE = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<!-- {target} -->
<plist version="1.0">
<dict>
    <key>com.apple.security.app-sandbox</key>
    <true/>
    <key>com.apple.security.network.client</key>
    <true/>
    <key>com.apple.security.application-groups</key>
    <array>
        <string>{{app_group}}</string>
    </array>
</dict>
</plist>
'''

APP_ENTITLEMENTS_TEMPLATE = _ENTITLEMENTS_TEMPLATE.format(target='Containing app target')
EXTENSION_ENTITLEMENTS_TEMPLATE = _ENTITLEMENTS_TEMPLATE.format(target='Safari web extension target')


def render_entitlements(app_group, template=APP_ENTITLEMENTS_TEMPLATE):
    return template.format(app_group=app_group)


def create_entitlements_files(config):
    app_ent_path = config.app_entitlements_path
    ext_ent_path = config.extension_entitlements_path

    app_ent_path.write_text(render_entitlements(config.app_group, APP_ENTITLEMENTS_TEMPLATE), encoding='utf-8')
    print('[+] Created: {}'.format(app_ent_path))

    ext_ent_path.write_text(render_entitlements(config.app_group, EXTENSION_ENTITLEMENTS_TEMPLATE), encoding='utf-8')
    print('[+] Created: {}'.format(ext_ent_path))

    return app_ent_path, ext_ent_path
