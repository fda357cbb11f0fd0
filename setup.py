# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from setuptools import setup, find_packages

VERSION = (0, 1, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))
__description__ = '''Tunnel a single TCP connection through a SOCKS4 proxy
    (e.g. a local Tor daemon) and issue one HTTP HEAD request over it.'''
__author__ = 'Abhinav Singh'
__author_email__ = 'mailsforabhinav@gmail.com'
__license__ = 'BSD'

if __name__ == '__main__':
    setup(
        name='tormask',
        version=__version__,
        author=__author__,
        author_email=__author_email__,
        description=__description__,
        long_description=open(
            'README.md', 'r', encoding='utf-8').read().strip(),
        long_description_content_type='text/markdown',
        license=__license__,
        python_requires='>=3.7',
        zip_safe=False,
        packages=find_packages(exclude=['tests', 'tests.*']),
        install_requires=[],
        extras_require={
            'testing': open(
                'requirements-testing.txt', 'r',
            ).read().strip().split(),
        },
        entry_points={
            'console_scripts': [
                'tormask = tormask:entry_point'
            ]
        },
        classifiers=[
            'Development Status :: 3 - Alpha',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'Intended Audience :: System Administrators',
            'License :: OSI Approved :: BSD License',
            'Operating System :: POSIX',
            'Operating System :: POSIX :: Linux',
            'Operating System :: MacOS :: MacOS X',
            'Operating System :: Microsoft :: Windows',
            'Programming Language :: Python :: 3 :: Only',
            'Programming Language :: Python :: 3',
            'Topic :: Internet',
            'Topic :: Internet :: Proxy Servers',
            'Topic :: System :: Networking',
            'Topic :: Utilities',
        ],
        keywords=(
            'socks, socks4, tor, proxy client, tunnel, http head, Python3'
        )
    )
