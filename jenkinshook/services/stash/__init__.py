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


from jenkinshook.services import base
from jenkinshook.services.stash import clone
from jenkinshook.services.stash import repository


class Stash(base.BaseSCMServicePlugin):
    """Plugin exposing the repositories of a Stash server."""

    _config_section = "stash"
    service_name = "stash"

    def __init__(self, conf):
        super(Stash, self).__init__(conf)
        self.repository = repository.StashRepositoryManager(self)
        self.nav = clone.StashNavBuilder(self)
        self.ssh_configuration = clone.StashSshConfiguration(self)
        self.ssh_resolver = clone.StashSshCloneUrlResolver(self)
        self.settings = repository.StashHookSettingsManager(self)

    def get_ssh_conf(self):
        return self.conf.get('ssh') or {}
