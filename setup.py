import re

import setuptools

with open('numtower/_version.py') as f:
    metadata = dict(re.findall(r"^(__\w+__) = '([^']*)'", f.read(), re.MULTILINE))

setuptools.setup(
    name='numtower',
    version=metadata['__version__'],
    author=metadata['__author__'],
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8.0',
    install_requires=['sortedcontainers'],
    extras_require={'test': ['pytest<9']},
    include_package_data=True,
    data_files=[
        ('', ['README.md', 'CHANGELOG.md']),
    ],
)
