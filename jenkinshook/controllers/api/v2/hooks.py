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
from jenkinshook.services import exceptions as exc


class RepositoryHookController(base.APIv2Controller):
    """Receives the ref changes pushed to a repository."""

    def __init__(self, project_key, slug):
        super(RepositoryHookController, self).__init__()
        self.project_key = project_key
        self.slug = slug

    @expose('json', generic=True)
    def push(self, **kwargs):
        abort(405)

    @push.when(method='POST', template='json')
    def push_post(self, **kwargs):
        _policy = 'jenkinshook.hooks:trigger'
        base.enforce(_policy, {'project': self.project_key,
                               'slug': self.slug})
        kwargs = base.get_request_kwargs(kwargs)
        repository = base.get_repository(self.project_key, self.slug)
        settings = base.get_hook_settings(repository)
        if settings is None:
            abort(404,
                  detail='Jenkins hook is not enabled for %s'
                  % repository.name)
        webhook = base.get_webhook()
        try:
            results = webhook.post_receive(repository, settings,
                                           kwargs.get('refChanges') or [])
        except exc.InvalidSettingsError as e:
            response.status = 400
            self._logger.warning('Invalid hook settings for %s: %s'
                                 % (repository.name, e))
            return {'error_description': str(e),
                    'errors': e.errors}
        except Exception as e:
            response.status = 500
            self._logger.exception(e)
            return {'error_description': str(e)}
        return {'results': [r.to_dict() for r in results]}


class HooksController(base.RepositoryLookupController):
    """/v2/hooks/projects/<key>/repos/<slug>/push"""

    repository_controller = RepositoryHookController
