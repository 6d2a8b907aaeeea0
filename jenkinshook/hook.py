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

from jenkinshook.resource import as_bool
from jenkinshook.resource import validate_settings
from jenkinshook.services import exceptions as exc


logger = logging.getLogger(__name__)


class JenkinsWebhook(object):
    """Notifies Jenkins of the refs pushed to a repository."""

    def __init__(self, notifier):
        self.notifier = notifier

    def post_receive(self, repository, settings, ref_changes):
        errors = validate_settings(settings)
        if errors:
            raise exc.InvalidSettingsError(errors)
        results = []
        for change in ref_changes:
            if change.get('type') == 'DELETE':
                logger.debug('Skipping deleted ref %s of %s'
                             % (change.get('refId'), repository.name))
                continue
            result = self.notifier.notify(
                repository,
                settings['jenkinsBase'],
                as_bool(settings.get('ignoreCerts')),
                settings['cloneType'],
                settings.get('cloneUrl'),
                ref=change.get('refId'),
                sha1=change.get('toHash'),
                omit_hash_code=as_bool(settings.get('omitHashCode')),
                omit_branch_name=as_bool(settings.get('omitBranchName')))
            if not result.successful:
                logger.warning('Jenkins notification failed for %s: %s'
                               % (repository.name, result.message))
            results.append(result)
        return results
