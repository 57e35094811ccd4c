"""
Setup file for the PATH alerts feed package.
"""

import setuptools

setuptools.setup(
    name='path-alerts-feed',
    version='1.0.0',
    description='PATH alert bulletin to GTFS-RT service alerts feed',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.28',
        'lxml>=4.9',
        'cssselect>=1.2',
        'protobuf>=3.20',
        'gtfs-realtime-bindings>=1.0.0',
        'google-cloud-pubsub>=2.18',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
