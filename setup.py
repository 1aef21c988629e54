import os
from setuptools import setup, find_packages

version = '1.0'

here = os.path.dirname(__file__)

with open(os.path.join(here, 'README.rst')) as fp:
    longdesc = fp.read()

with open(os.path.join(here, 'CHANGELOG.rst')) as fp:
    longdesc += "\n\n" + fp.read()

setup(
    name='python-dhcpv6',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='Apache Software License 2.0',
    description='Library to decode and encode the options section '
    'of DHCPv6 messages',
    long_description=longdesc,
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "License :: OSI Approved :: Apache Software License",

        # "Development Status :: 1 - Planning",
        # "Development Status :: 2 - Pre-Alpha",
        # "Development Status :: 3 - Alpha",
        "Development Status :: 4 - Beta",
        # "Development Status :: 5 - Production/Stable",
        # "Development Status :: 6 - Mature",
        # "Development Status :: 7 - Inactive",

        "Programming Language :: Python :: 3",
        "Topic :: System :: Networking",

        "Programming Language :: Python :: Implementation :: CPython",
    ],
    package_data={'': ['README.rst', 'CHANGELOG.rst']},
    zip_safe=False)
