#!/usr/bin/env python3

from pathlib import Path
from setuptools import setup

version = (Path(__file__).parent / 'VERSION').read_text().strip()

setup(
    name='memphrase',
    version=version,
    description='Generate a memorable passphrase and copy it to clipboard',
    python_requires='>=3.9',
    packages=['memphrase'],
    package_data={'memphrase': ['data/*.txt']},
    install_requires=['pyperclip'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['memphrase = memphrase.main:main']},
)
