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


"""Clone URL configuration and notification testing for the Jenkins
webhook of a repository."""


import logging

from jenkinshook.model import CloneType
from jenkinshook.services import exceptions as exc


logger = logging.getLogger(__name__)


def as_bool(value):
    """form values are strings, configuration values may be booleans"""
    if isinstance(value, str):
        return value.strip().lower() in ('true', 'on', '1', 'yes')
    return bool(value)


def _is_set(value):
    return isinstance(value, str) and bool(value.strip())


def validate_settings(settings):
    """Check the Jenkins hook settings of a repository.

    Returns a dict mapping each faulty field to an error message. An empty
    dict means the settings can be used to notify Jenkins."""
    errors = {}
    if not _is_set(settings.get('jenkinsBase')):
        errors['jenkinsBase'] = "Jenkins base URL is required"
        return errors
    clone_type = settings.get('cloneType')
    if not _is_set(clone_type):
        errors['cloneType'] = "Clone type is required"
        return errors
    ctype = CloneType.parse(clone_type)
    if ctype is None:
        errors['cloneType'] = "Unknown clone type: %s" % clone_type
    elif (ctype == CloneType.CUSTOM and
          not _is_set(settings.get('cloneUrl'))):
        errors['cloneUrl'] = ("Clone URL is required when the clone type "
                              "is custom")
    return errors


class JenkinsResource(object):
    """Backs the config and test endpoints of a repository.

    The collaborators are provided by the service plugins: a notifier from
    the CI service, the nav builder and SSH managers from the repository
    hosting service."""

    def __init__(self, notifier, nav_builder, ssh_configuration,
                 ssh_clone_url_resolver):
        self.notifier = notifier
        self.nav_builder = nav_builder
        self.ssh_configuration = ssh_configuration
        self.ssh_clone_url_resolver = ssh_clone_url_resolver

    def _ssh_url(self, repository):
        if not self.ssh_configuration.is_enabled():
            return ''
        try:
            return self.ssh_clone_url_resolver.get_clone_url(repository)
        except exc.SshServerDisabledError as e:
            logger.debug('No SSH clone URL for %s: %s' % (repository.name,
                                                          e))
            return ''

    def config(self, repository):
        """returns the HTTP and SSH clone URLs of the repository."""
        return {'http': self.nav_builder.get_absolute_url(repository, 'git'),
                'ssh': self._ssh_url(repository)}

    def test(self, repository, jenkins_base, clone_type, clone_url,
             ignore_certs, omit_hash_code):
        """notify Jenkins with the given settings. Invalid settings are
        reported in the result, Jenkins is not contacted then."""
        errors = validate_settings({'jenkinsBase': jenkins_base,
                                    'cloneType': clone_type,
                                    'cloneUrl': clone_url})
        if errors:
            message = list(errors.values())[0]
            logger.debug('Refusing to test %s: %s' % (repository.name,
                                                      message))
            return {'successful': False, 'message': message}
        logger.debug('Triggering jenkins notification for repository %s'
                     % repository.name)
        result = self.notifier.test(repository, jenkins_base, clone_type,
                                    clone_url, ignore_certs, omit_hash_code)
        logger.debug('Got response from jenkins: %r' % result)
        return {'successful': result.successful,
                'url': result.url,
                'message': result.message}
