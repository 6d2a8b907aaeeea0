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
from urllib.parse import quote

import requests

from jenkinshook.model import CloneType
from jenkinshook.model import NotificationResult
from jenkinshook.services import exceptions as exc


logger = logging.getLogger(__name__)


NOTIFY_URL = "%s/git/notifyCommit?url=%s"


class JenkinsNotifier(object):
    """Triggers the git plugin of a Jenkins server through its
    notifyCommit endpoint. Jenkins then polls every job using the notified
    clone URL."""

    def __init__(self, plugin, nav_builder, ssh_clone_url_resolver):
        self.plugin = plugin
        self.nav_builder = nav_builder
        self.ssh_clone_url_resolver = ssh_clone_url_resolver

    def get_clone_url(self, repository, clone_type, clone_url):
        ctype = CloneType.parse(clone_type)
        if ctype == CloneType.HTTP:
            return self.nav_builder.get_absolute_url(repository, 'git')
        if ctype == CloneType.SSH:
            return self.ssh_clone_url_resolver.get_clone_url(repository)
        if ctype == CloneType.CUSTOM:
            if not clone_url:
                raise ValueError("No clone URL given for custom clone type")
            return clone_url
        raise ValueError("Unknown clone type: %s" % clone_type)

    def get_url(self, repository, jenkins_base, clone_type, clone_url,
                ref=None, sha1=None, omit_hash_code=False,
                omit_branch_name=False):
        url = NOTIFY_URL % (
            jenkins_base.rstrip('/'),
            quote(self.get_clone_url(repository, clone_type, clone_url),
                  safe=''))
        if ref and not omit_branch_name:
            url += "&branches=%s" % quote(ref, safe='')
        if sha1 and not omit_hash_code:
            url += "&sha1=%s" % sha1
        return url

    def notify(self, repository, jenkins_base, ignore_certs, clone_type,
               clone_url, ref=None, sha1=None, omit_hash_code=False,
               omit_branch_name=False):
        try:
            url = self.get_url(repository, jenkins_base, clone_type,
                               clone_url, ref, sha1, omit_hash_code,
                               omit_branch_name)
        except (ValueError, KeyError, exc.UnavailableActionError) as e:
            msg = u'[%s] could not build the notification URL for %s: %s'
            logger.error(msg % (self.plugin.service_name,
                                repository.name, e))
            return NotificationResult(
                False, None,
                "An error occurred trying to generate the Jenkins URL: "
                "%s" % e)
        client = self.plugin.get_client(ignore_certs=ignore_certs)
        try:
            resp = client.get(url, timeout=self.plugin.get_timeout(),
                              verify=not ignore_certs)
            body = resp.text
            msg = u'[%s] triggered jenkins with url %s'
            logger.debug(msg % (self.plugin.service_name, url))
        except requests.exceptions.RequestException as e:
            msg = u'[%s] error triggering jenkins with url %s'
            logger.exception(msg % (self.plugin.service_name, url))
            return NotificationResult(False, url, str(e))
        finally:
            client.close()
        # the git plugin answers "Scheduled polling of <job>" on success
        return NotificationResult(body.startswith("Scheduled"), url,
                                  "Jenkins response: %s" % body)

    def test(self, repository, jenkins_base, clone_type, clone_url,
             ignore_certs=False, omit_hash_code=False):
        """notify Jenkins without any ref or hash, to check the settings"""
        return self.notify(repository, jenkins_base, ignore_certs,
                           clone_type, clone_url,
                           omit_hash_code=omit_hash_code)
