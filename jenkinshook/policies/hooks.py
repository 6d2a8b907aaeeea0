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


BASE_POLICY_NAME = 'jenkinshook.hooks'
POLICY_ROOT = BASE_POLICY_NAME + ':%s'


rules = [
    policy.RuleDefault(
        name=POLICY_ROOT % 'trigger',
        check_str=base.RULE_ADMIN_OR_SERVICE),
]


def list_rules():
    return rules
