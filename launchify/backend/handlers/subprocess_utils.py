import os
import sys

# Set by AppImage / PyInstaller runtimes; a child wine process must not inherit them
_BUNDLE_VARS = ('APPIMAGE', 'APPDIR', 'ARGV0', 'OWD')
_SYSTEM_PATHS = ('/usr/bin', '/usr/local/bin', '/bin')


def get_clean_subprocess_env(extra_env=None):
    """
    Returns a copy of os.environ with bundled-runtime variables removed.
    Optionally merges in extra_env dict (extra_env wins on conflicts).
    System binary directories are appended to PATH when missing so that
    wine, wineserver, curl and friends resolve the same way `which` did.
    """
    env = os.environ.copy()

    for key in _BUNDLE_VARS:
        env.pop(key, None)
    for k in list(env):
        if k.startswith('_MEIPASS'):
            del env[k]

    # Frozen bundles rewrite LD_LIBRARY_PATH; restore the original if it was saved
    if 'LD_LIBRARY_PATH_ORIG' in env:
        env['LD_LIBRARY_PATH'] = env.pop('LD_LIBRARY_PATH_ORIG')
    elif getattr(sys, 'frozen', False):
        env.pop('LD_LIBRARY_PATH', None)

    path_parts = [p for p in env.get('PATH', '').split(os.pathsep) if p]
    for sys_path in _SYSTEM_PATHS:
        if sys_path not in path_parts and os.path.isdir(sys_path):
            path_parts.append(sys_path)
    env['PATH'] = os.pathsep.join(path_parts)

    if extra_env:
        env.update(extra_env)
    return env
