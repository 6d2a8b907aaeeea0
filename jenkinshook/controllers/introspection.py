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

from importlib import metadata

from pecan import expose

from jenkinshook import services


class IntrospectionController(object):
    """A controller that allows a client to know more about the server."""

    def get_jenkinshook_version(self):
        return metadata.version('jenkinshook')

    @expose(template='json')
    def index(self, **kwargs):
        return_value = {'service': {
            'name': 'jenkinshook',
            'version': self.get_jenkinshook_version(),
            'services': sorted(services.SERVICES), }}
        return return_value
