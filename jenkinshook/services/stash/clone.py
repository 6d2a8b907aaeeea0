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
from urllib.parse import quote, urlsplit, urlunsplit

from jenkinshook.services import base
from jenkinshook.services import exceptions as exc


logger = logging.getLogger(__name__)


def _repo_path(repository):
    return '%s/%s.git' % (repository.project_key.lower(), repository.slug)


class StashNavBuilder(base.NavBuilder):
    """Builds the HTTP(S) clone URLs served under <base_url>/scm/"""

    def get_absolute_url(self, repository, clone_type='git', username=None):
        if clone_type != 'git':
            msg = '[%s] unsupported clone type: %s'
            raise exc.UnavailableActionError(
                msg % (self.plugin.service_name, clone_type))
        base_url = self.plugin.conf['base_url'].rstrip('/')
        url = '%s/scm/%s' % (base_url, _repo_path(repository))
        if not username:
            return url
        scheme, netloc, path, query, fragment = urlsplit(url)
        netloc = '%s@%s' % (quote(username, safe=''), netloc)
        return urlunsplit((scheme, netloc, path, query, fragment))


class StashSshConfiguration(base.SshConfigurationManager):

    def is_enabled(self):
        return bool(self.plugin.get_ssh_conf().get('enabled', False))


class StashSshCloneUrlResolver(base.SshCloneUrlResolver):
    """Resolves ssh://git@host:port/key/slug.git clone URLs"""

    def get_clone_url(self, repository):
        ssh_conf = self.plugin.get_ssh_conf()
        if not ssh_conf.get('enabled', False):
            raise exc.SshServerDisabledError(
                "Internal SSH server is disabled")
        base_url = ssh_conf['base_url'].rstrip('/')
        return '%s/%s' % (base_url, _repo_path(repository))
