import os
import re

from setuptools import setup, find_packages


# ----------------------------------------------------------------------------------------------------------------------
# Read the version information without importing the package

basedir = 'src'

with open(os.path.join(basedir, 'decset', 'version.py')) as f:
    _match = re.search(
        r'^VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH = \((\d+), (\d+), (\d+)\)',
        f.read(),
        re.M
    )
if _match is None:
    raise RuntimeError('Unable to find the version tuple in decset/version.py')
version = '.'.join(_match.groups())

# ----------------------------------------------------------------------------------------------------------------------

setup(
    name='decset',
    version=version,
    description='Exact set algebra on unions of intervals over arbitrary-precision decimals',
    package_dir={'': basedir},
    packages=find_packages(basedir),
    python_requires='>=3.8',
    install_requires=[
        'dnutils',
    ],
    extras_require={
        'test': [
            'ddt',
            'pytest',
        ],
        'doc': [
            'sphinx',
            'sphinx-autoapi',
            'sphinx_rtd_theme',
        ],
    },
)
