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

import requests
from requests.auth import HTTPBasicAuth

from jenkinshook.services import base
from jenkinshook.services.jenkins import notifier


logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 10


class Jenkins(base.BaseCIServicePlugin):
    """Plugin notifying a Jenkins server of pushes."""

    _config_section = "jenkins"
    service_name = "jenkins"

    def get_timeout(self):
        return self.conf.get('timeout') or DEFAULT_TIMEOUT

    def get_client(self, ignore_certs=False):
        session = requests.Session()
        session.verify = not ignore_certs
        if self.conf.get('user'):
            session.auth = HTTPBasicAuth(self.conf['user'],
                                         self.conf.get('password'))
        return session

    def get_notifier(self, scm):
        return notifier.JenkinsNotifier(self, scm.nav, scm.ssh_resolver)
