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


from oslo_policy import policy

from jenkinshook.policies import base


BASE_POLICY_NAME = 'jenkinshook.jenkins'
POLICY_ROOT = BASE_POLICY_NAME + ':%s'
REPO_ADMIN = '%s or %s' % (base.RULE_ADMIN_API, base.RULE_REPO_ADMIN_API)


rules = [
    policy.RuleDefault(
        name=POLICY_ROOT % 'config',
        check_str=REPO_ADMIN),
    policy.RuleDefault(
        name=POLICY_ROOT % 'test',
        check_str=REPO_ADMIN),
]


def list_rules():
    return rules
