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

from unittest import TestCase
from mock import MagicMock

from jenkinshook.model import NotificationResult
from jenkinshook.model import Repository
from jenkinshook.resource import JenkinsResource
from jenkinshook.resource import as_bool
from jenkinshook.resource import validate_settings
from jenkinshook.services import exceptions as exc


JENKINS_BASE = "http://jenkins.localhost/jenkins"
IGNORE_CERTS = False
OMIT_HASH_CODE = False

HTTP_URL = "https://stash.localhost/stash/scm/test/test.git"
SSH_URL = "ssh://git@stash.localhost:7999/test/test.git"
EMPTY_SSH_URL = ""


class BaseJenkinsResourceTest(TestCase):
    def setUp(self):
        self.notifier = MagicMock()
        self.nav_builder = MagicMock()
        self.ssh_configuration = MagicMock()
        self.ssh_clone_url_resolver = MagicMock()
        self.resource = JenkinsResource(self.notifier,
                                        self.nav_builder,
                                        self.ssh_configuration,
                                        self.ssh_clone_url_resolver)
        self.repository = Repository('KEY', 'SLUG')


class TestJenkinsResourceTest(BaseJenkinsResourceTest):
    def test_fails_without_jenkins_base(self):
        result = self.resource.test(self.repository, None, "http", None,
                                    IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertEqual("Jenkins base URL is required",
                         result['message'])
        result = self.resource.test(self.repository, "", "http", HTTP_URL,
                                    IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertFalse(self.notifier.test.called)

    def test_fails_without_clone_type(self):
        result = self.resource.test(self.repository, JENKINS_BASE, None,
                                    HTTP_URL, IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertEqual("Clone type is required",
                         result['message'])
        self.assertFalse(self.notifier.test.called)

    def test_fails_with_unknown_clone_type(self):
        result = self.resource.test(self.repository, JENKINS_BASE, "svn",
                                    HTTP_URL, IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertEqual("Unknown clone type: svn",
                         result['message'])
        self.assertFalse(self.notifier.test.called)

    def test_fails_without_custom_clone_url(self):
        result = self.resource.test(self.repository, JENKINS_BASE, "custom",
                                    None, IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertTrue('Clone URL is required' in result['message'])
        self.assertFalse(self.notifier.test.called)

    def test_fails_with_non_string_settings(self):
        result = self.resource.test(self.repository, 42, "http", None,
                                    IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertEqual("Jenkins base URL is required",
                         result['message'])
        result = self.resource.test(self.repository, JENKINS_BASE, "custom",
                                    ['git@localhost:test.git'],
                                    IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertTrue('Clone URL is required' in result['message'])
        result = self.resource.test(self.repository, JENKINS_BASE, 1,
                                    None, IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertFalse(result['successful'])
        self.assertEqual("Clone type is required", result['message'])
        self.assertFalse(self.notifier.test.called)

    def test_relays_notifier_result(self):
        url = JENKINS_BASE + '/git/notifyCommit?url=x'
        self.notifier.test.return_value = NotificationResult(
            True, url, 'Jenkins response: Scheduled polling of test')
        result = self.resource.test(self.repository, JENKINS_BASE, "http",
                                    None, IGNORE_CERTS, OMIT_HASH_CODE)
        self.notifier.test.assert_called_once_with(
            self.repository, JENKINS_BASE, "http", None,
            IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertEqual({'successful': True,
                          'url': url,
                          'message': 'Jenkins response: '
                                     'Scheduled polling of test'},
                         result)

    def test_relays_notifier_failure(self):
        self.notifier.test.return_value = NotificationResult(
            False, None, 'Connection refused')
        result = self.resource.test(self.repository, JENKINS_BASE, "custom",
                                    HTTP_URL, True, True)
        self.notifier.test.assert_called_once_with(
            self.repository, JENKINS_BASE, "custom", HTTP_URL, True, True)
        self.assertFalse(result['successful'])
        self.assertEqual('Connection refused', result['message'])

    def test_ssh_clone_type_does_not_need_clone_url(self):
        self.notifier.test.return_value = NotificationResult(True, 'u', 'm')
        result = self.resource.test(self.repository, JENKINS_BASE, "ssh",
                                    None, IGNORE_CERTS, OMIT_HASH_CODE)
        self.assertTrue(result['successful'])
        self.assertEqual(1, self.notifier.test.call_count)


class TestJenkinsResourceConfig(BaseJenkinsResourceTest):
    def setUp(self):
        super(TestJenkinsResourceConfig, self).setUp()
        self.nav_builder.get_absolute_url.return_value = HTTP_URL

    def test_config(self):
        self.ssh_configuration.is_enabled.return_value = True
        self.ssh_clone_url_resolver.get_clone_url.return_value = SSH_URL
        data = self.resource.config(self.repository)
        self.assertEqual({'http': HTTP_URL, 'ssh': SSH_URL}, data)
        self.ssh_clone_url_resolver.get_clone_url.assert_called_once_with(
            self.repository)
        self.nav_builder.get_absolute_url.assert_called_once_with(
            self.repository, 'git')

    def test_config_with_ssh_disabled(self):
        self.ssh_configuration.is_enabled.return_value = False
        self.ssh_clone_url_resolver.get_clone_url.side_effect = \
            exc.SshServerDisabledError("Internal SSH server is disabled")
        data = self.resource.config(self.repository)
        self.assertEqual(HTTP_URL, data['http'])
        self.assertEqual(EMPTY_SSH_URL, data['ssh'])
        self.assertFalse(self.ssh_clone_url_resolver.get_clone_url.called)
        self.nav_builder.get_absolute_url.assert_called_once_with(
            self.repository, 'git')

    def test_config_when_ssh_server_goes_away(self):
        self.ssh_configuration.is_enabled.return_value = True
        self.ssh_clone_url_resolver.get_clone_url.side_effect = \
            exc.SshServerDisabledError("Internal SSH server is disabled")
        data = self.resource.config(self.repository)
        self.assertEqual({'http': HTTP_URL, 'ssh': EMPTY_SSH_URL}, data)

    def test_config_propagates_unexpected_errors(self):
        self.ssh_configuration.is_enabled.return_value = True
        self.ssh_clone_url_resolver.get_clone_url.side_effect = \
            RuntimeError("boom")
        self.assertRaises(RuntimeError,
                          self.resource.config, self.repository)


class TestValidateSettings(TestCase):
    def test_valid_settings(self):
        self.assertEqual({}, validate_settings(
            {'jenkinsBase': JENKINS_BASE, 'cloneType': 'http'}))
        self.assertEqual({}, validate_settings(
            {'jenkinsBase': JENKINS_BASE, 'cloneType': 'CUSTOM',
             'cloneUrl': HTTP_URL}))

    def test_invalid_settings(self):
        self.assertEqual(['jenkinsBase'],
                         list(validate_settings({'cloneType': 'http'})))
        self.assertEqual(['cloneType'],
                         list(validate_settings(
                             {'jenkinsBase': JENKINS_BASE})))
        self.assertEqual(['cloneUrl'],
                         list(validate_settings(
                             {'jenkinsBase': JENKINS_BASE,
                              'cloneType': 'custom',
                              'cloneUrl': ''})))

    def test_as_bool(self):
        for value in ('true', 'True', 'on', '1', 'yes', True):
            self.assertTrue(as_bool(value))
        for value in ('false', 'off', '', None, False, '0'):
            self.assertFalse(as_bool(value))
