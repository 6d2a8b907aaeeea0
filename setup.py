#
# Copyright (C) 2026 Red Hat
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


VERSION = '0.1.0'


setup(
    name='jenkinshook',
    version=VERSION,
    description=('A REST service notifying Jenkins of the pushes made to '
                 'Stash repositories'),
    author='Software Factory',
    author_email='softwarefactory@redhat.com',
    zip_safe=False,
    include_package_data=True,
    packages=find_packages(),
    python_requires='>=3.8',
    install_requires=[
        'pecan',
        'stevedore',
        'oslo.config',
        'oslo.policy',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
            'mock',
            'WebTest',
            'PyYAML',
        ],
    },
    entry_points={
        'jenkinshook.service': [
            ('stash = jenkinshook.services.stash:Stash'),
            ('jenkins = jenkinshook.services.jenkins:Jenkins'),
        ],
    },
    keywords=['stash', 'jenkins', 'webhook', 'CI', 'continuous integration'],
)
