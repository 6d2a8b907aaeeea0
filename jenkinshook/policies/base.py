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
# -*- coding: utf-8 -*-


from pecan import conf
from oslo_policy import policy


RULE_ADMIN_OR_SERVICE = 'rule:admin_or_service'
RULE_ADMIN_API = 'rule:admin_api'
RULE_REPO_ADMIN_API = 'rule:repo_admin_api'

SERVICE_USER = 'STASH_SERVICE_USER'


def get_admin_account():
    try:
        return conf.admin['name']
    except (AttributeError, KeyError):
        return 'admin'


@policy.register('group')
class GroupCheck(policy.Check):
    """Check that there is a matching group in the ``creds`` dict."""

    def __call__(self, target, creds, enforcer):
        try:
            match = self.match % target
        except KeyError:
            # the target does not define the project
            return False
        if 'groups' in creds:
            return match.lower() in [x.lower() for x in creds['groups']]
        return False


def list_rules():
    return [
        policy.RuleDefault('is_admin', 'username:%s' % get_admin_account()),
        policy.RuleDefault('is_service_upper',
                           'username:%s' % SERVICE_USER),
        policy.RuleDefault('is_service_lower',
                           'username:%s' % SERVICE_USER.lower()),
        policy.RuleDefault('is_service',
                           'rule:is_service_lower or rule:is_service_upper'),
        policy.RuleDefault('admin_or_service',
                           'rule:is_admin or rule:is_service'),
        policy.RuleDefault('admin_api', 'rule:is_admin'),
        policy.RuleDefault('is_repo_admin', 'group:%(project)s-admin'),
        policy.RuleDefault('repo_admin_api', 'rule:is_repo_admin'),
    ]
