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


import abc

from jenkinshook.services import exceptions as exc


class BaseManager(object, metaclass=abc.ABCMeta):
    def __init__(self, plugin):
        self.plugin = plugin


class RepositoryManager(BaseManager):
    """Abstract class looking up repositories hosted by the service."""

    def get(self, project_key, slug):
        """Fetching operation"""
        raise exc.UnavailableActionError()


class NavBuilder(BaseManager):
    """Abstract class building the host's URLs for a repository."""

    def get_absolute_url(self, repository, clone_type, username=None):
        """returns the absolute clone URL of the repository. The username
        is embedded in the URL only if one is given."""
        raise exc.UnavailableActionError()


class SshConfigurationManager(BaseManager):
    """Abstract class reporting the state of the host's internal SSH
    server."""

    def is_enabled(self):
        return False


class SshCloneUrlResolver(BaseManager):
    """Abstract class resolving the SSH clone URL of a repository."""

    def get_clone_url(self, repository):
        raise exc.SshServerDisabledError("Internal SSH server is disabled")


class HookSettingsManager(BaseManager):
    """Abstract class storing the Jenkins hook settings of repositories."""

    def get(self, repository):
        """returns the settings of the repository, or None if the hook
        is not enabled for it."""
        return None


class BaseServicePlugin(object, metaclass=abc.ABCMeta):
    """Base plugin for a service the webhook talks to.
    """

    _config_section = "base"
    service_name = "base service"

    def __init__(self, conf):
        self._full_conf = conf
        try:
            self.configure_plugin(conf)
        except AttributeError:
            raise Exception(repr(conf))

    def configure_plugin(self, conf):
        try:
            self.conf = getattr(conf, self._config_section, None)
        except KeyError:
            msg = ("The %s service is not available" % self._config_section)
            raise exc.ServiceNotAvailableError(msg)
        if not self.conf:
            msg = ("The %s service is not available" % self._config_section)
            raise exc.ServiceNotAvailableError(msg)

    def get_client(self, *args, **kwargs):
        """returns a service client to be used by the managers."""


class BaseSCMServicePlugin(BaseServicePlugin):
    """Base plugin for a service hosting git repositories. It provides
    the clone URLs and the hook settings of its repositories."""

    def __init__(self, conf):
        super(BaseSCMServicePlugin, self).__init__(conf)
        # place holders
        self.repository = RepositoryManager(self)
        self.nav = NavBuilder(self)
        self.ssh_configuration = SshConfigurationManager(self)
        self.ssh_resolver = SshCloneUrlResolver(self)
        self.settings = HookSettingsManager(self)


class BaseCIServicePlugin(BaseServicePlugin):
    """Base plugin for a continuous integration server that can be
    notified of pushes."""

    def get_notifier(self, scm):
        """returns a notifier resolving clone URLs through the scm
        service plugin."""
        raise exc.UnavailableActionError()
