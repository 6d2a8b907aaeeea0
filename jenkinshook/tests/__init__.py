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


class dummy_conf():
    services = ['stash',
                'jenkins',
                ]
    stash = {
        'base_url': 'https://stash.localhost/stash',
        'ssh': {
            'enabled': True,
            'base_url': 'ssh://git@stash.localhost:7999',
        },
        'hooks': [
            {'project': 'TEST',
             'slug': 'test',
             'jenkinsBase': 'http://jenkins.localhost/jenkins',
             'cloneType': 'http',
             'cloneUrl': None,
             'ignoreCerts': False,
             'omitHashCode': False,
             'omitBranchName': False},
            {'project': 'TEST',
             'slug': 'broken',
             'jenkinsBase': '',
             'cloneType': 'http'},
        ],
    }
    jenkins = {
        'timeout': 5,
    }
    admin = {
        'name': 'admin',
    }
    app = {
        'root': 'jenkinshook.controllers.root.RootController',
        'modules': ['jenkinshook'],
        'debug': False,
    }
    logging = {
        'loggers': {
            'root': {'level': 'INFO', 'handlers': ['console']},
            'jenkinshook': {'level': 'DEBUG', 'handlers': ['console']},
            'py.warnings': {'handlers': ['console']},
            '__force_dict__': True},
        'handlers': {
            'console': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'simple'}},
        'formatters': {
            'simple': {
                'format': ('%(asctime)s %(levelname)-5.5s [%(name)s]'
                           '[%(threadName)s] %(message)s')}}
    }
    policy = {}
