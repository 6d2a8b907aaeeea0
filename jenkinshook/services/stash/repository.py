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

from jenkinshook.model import Repository
from jenkinshook.services import base


logger = logging.getLogger(__name__)


class StashRepositoryManager(base.RepositoryManager):

    def get(self, project_key, slug):
        if not project_key or not slug:
            raise ValueError("Please specify a project key and a slug")
        return Repository(project_key, slug)


class StashHookSettingsManager(base.HookSettingsManager):
    """Hook settings are read from the 'hooks' list of the stash section,
    one entry per repository:

        {'project': 'KEY', 'slug': 'repo', 'jenkinsBase': ...,
         'cloneType': ..., 'cloneUrl': ..., 'ignoreCerts': ...,
         'omitHashCode': ..., 'omitBranchName': ...}
    """

    def get(self, repository):
        for hook in self.plugin.conf.get('hooks') or []:
            if (hook.get('project') == repository.project_key and
                    hook.get('slug') == repository.slug):
                settings = dict((k, v) for k, v in hook.items()
                                if k not in ('project', 'slug'))
                return settings
        msg = u'[%s] Jenkins hook not enabled for %s'
        logger.debug(msg % (self.plugin.service_name, repository.name))
        return None
