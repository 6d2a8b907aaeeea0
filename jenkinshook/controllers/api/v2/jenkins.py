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


from pecan import expose
from pecan import response, abort

from jenkinshook.controllers.api.v2 import base
from jenkinshook.resource import as_bool


class RepositoryJenkinsController(base.APIv2Controller):

    def __init__(self, project_key, slug):
        super(RepositoryJenkinsController, self).__init__()
        self.project_key = project_key
        self.slug = slug

    def _target(self):
        return {'project': self.project_key, 'slug': self.slug}

    @expose('json')
    def config(self):
        _policy = 'jenkinshook.jenkins:config'
        base.enforce(_policy, self._target())
        repository = base.get_repository(self.project_key, self.slug)
        resource = base.get_resource()
        try:
            return resource.config(repository)
        except Exception as e:
            response.status = 500
            self._logger.exception(e)
            return {'error_description': str(e)}

    @expose('json', generic=True)
    def test(self, **kwargs):
        abort(405)

    @test.when(method='POST', template='json')
    def test_post(self, **kwargs):
        _policy = 'jenkinshook.jenkins:test'
        base.enforce(_policy, self._target())
        kwargs = base.get_request_kwargs(kwargs)
        repository = base.get_repository(self.project_key, self.slug)
        resource = base.get_resource()
        try:
            return resource.test(repository,
                                 kwargs.get('jenkinsBase'),
                                 kwargs.get('cloneType'),
                                 kwargs.get('cloneUrl'),
                                 as_bool(kwargs.get('ignoreCerts')),
                                 as_bool(kwargs.get('omitHashCode')))
        except Exception as e:
            response.status = 500
            self._logger.exception(e)
            return {'error_description': str(e)}


class JenkinsController(base.RepositoryLookupController):
    """/v2/jenkins/projects/<key>/repos/<slug>/(config|test)"""

    repository_controller = RepositoryJenkinsController
