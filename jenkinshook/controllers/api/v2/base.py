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


import logging

from pecan import request, abort, expose

from jenkinshook import policy
from jenkinshook import services
from jenkinshook.hook import JenkinsWebhook
from jenkinshook.resource import JenkinsResource


logger = logging.getLogger(__name__)


def get_credentials():
    if not request.remote_user:
        request.remote_user = request.headers.get('X-Remote-User')
    credentials = {'username': request.remote_user, 'groups': []}
    # OpenID Connect authentication
    if request.headers.get("OIDC_CLAIM_groups", None) is not None:
        for group in request.headers.get('OIDC_CLAIM_groups').split(','):
            group = group.strip()
            # keycloak prefixes groups with /, remove it
            if group.startswith('/'):
                credentials['groups'].append(group[1:])
            elif group:
                credentials['groups'].append(group)
    return credentials


def authorize(rule_name, target):
    return policy.authorize(rule_name, target, get_credentials())


def enforce(rule_name, target):
    if not authorize(rule_name, target=target):
        abort(401,
              detail='Failure to comply with policy %s' % rule_name)


def get_request_kwargs(kwargs):
    """JSON bodies are not mapped to the handler's arguments by pecan."""
    if not kwargs and request.content_length:
        if 'json' in (request.content_type or ''):
            body = request.json
            return body if isinstance(body, dict) else {}
        return dict(request.params)
    return kwargs


def _get_plugins():
    scm = services.get_scm()
    ci = services.get_ci()
    if scm is None or ci is None:
        abort(404,
              detail='This service is not configured.')
    return scm, ci


def get_repository(project_key, slug):
    scm, _ = _get_plugins()
    return scm.repository.get(project_key, slug)


def get_resource():
    scm, ci = _get_plugins()
    return JenkinsResource(ci.get_notifier(scm),
                           scm.nav,
                           scm.ssh_configuration,
                           scm.ssh_resolver)


def get_webhook():
    scm, ci = _get_plugins()
    return JenkinsWebhook(ci.get_notifier(scm))


def get_hook_settings(repository):
    scm, _ = _get_plugins()
    return scm.settings.get(repository)


class APIv2Controller(object):
    def __init__(self, *args, **kwargs):
        self._logger = logging.getLogger(
            'jenkinshook.v2.controllers.%s' % self.__class__.__name__)


class RepositoryLookupController(APIv2Controller):
    """Routes /projects/<key>/repos/<slug>/... to an instance of
    repository_controller built for that repository."""

    repository_controller = None

    @expose()
    def _lookup(self, *remainder):
        if (len(remainder) < 4 or remainder[0] != 'projects' or
                remainder[2] != 'repos'):
            abort(404)
        project_key, slug = remainder[1], remainder[3]
        return (self.repository_controller(project_key, slug),
                list(remainder[4:]))
