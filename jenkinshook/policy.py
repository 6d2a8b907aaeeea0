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


"""the policy engine for jenkinshook."""


import logging
import os.path

from pecan import conf
from oslo_config import cfg
from oslo_policy import policy

from jenkinshook import policies


logger = logging.getLogger(__name__)


_ENFORCER = None


def _oslo_conf():
    # policy options only, nothing is read from oslo config files
    oslo_conf = cfg.ConfigOpts()
    oslo_conf(args=[], project='jenkinshook', default_config_files=[])
    return oslo_conf


def reset():
    global _ENFORCER
    if _ENFORCER:
        _ENFORCER.clear()
        _ENFORCER = None


def init(policy_file=None, rules=None):
    """Init an Enforcer class.
       :param policy_file: Custom policy file to use, if none is specified,
                           only the default rules are used.
       :param rules: Default dictionary / Rules to use. It will be
                     considered just in the first instantiation.
    """

    global _ENFORCER
    if not _ENFORCER:
        _ENFORCER = policy.Enforcer(_oslo_conf(),
                                    policy_file=policy_file,
                                    rules=rules,
                                    use_conf=False)
        _ENFORCER.register_defaults(policies.list_rules())
    if policy_file:
        _ENFORCER.load_rules(force_reload=True)
    register_rules(_ENFORCER)


def register_rules(enforcer):
    # rules loaded from the policy file take precedence
    for default in enforcer.registered_rules.values():
        if default.name not in enforcer.rules:
            enforcer.rules[default.name] = default.check


def get_policy_file():
    try:
        return conf['policy'].get('policy_file')
    except (KeyError, AttributeError):
        logger.info('Policy file not defined, going with default rules')
        return ''


def authorize(rule_name, target, credentials):
    reset()
    policy_file = get_policy_file()
    if not policy_file or not os.path.isfile(policy_file):
        msg = ('Policy file %s not found, initializing default policy '
               'engine')
        logger.info(msg % policy_file)
        init()
    else:
        init(policy_file=policy_file)
    try:
        result = _ENFORCER.enforce(rule_name, target, credentials,
                                   do_raise=False)
    except policy.PolicyNotRegistered:
        logger.error('Policy %s not registered' % rule_name)
        return False
    except Exception:
        logger.debug('Policy check for %(rule)s failed with credentials '
                     '%(credentials)s' % {'rule': rule_name,
                                          'credentials': credentials})
        raise
    return result
