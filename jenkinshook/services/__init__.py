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

from stevedore import driver

from jenkinshook import DEFAULT_SERVICES
from jenkinshook.services import base


logger = logging.getLogger(__name__)


# instanciated service plugins
SERVICES = {}


def load_services(conf):
    SERVICES.clear()
    try:
        if conf.services:
            services = conf.services
        else:
            services = DEFAULT_SERVICES
            msg = 'No service configured, loading: %s' % DEFAULT_SERVICES
            logger.info(msg)
    except AttributeError:
        services = DEFAULT_SERVICES
        msg = 'Obsolete conf file, loading default: %s' % DEFAULT_SERVICES
        logger.info(msg)

    for service in services:
        try:
            plugin = driver.DriverManager(namespace='jenkinshook.service',
                                          name=service,
                                          invoke_on_load=True,
                                          invoke_args=(conf,)).driver
            SERVICES[service] = plugin
            logger.info('%s plugin loaded successfully' % service)
        except Exception as e:
            logger.error('Could not load service %s: %s' % (service, e))
    return SERVICES


def _find(plugin_class):
    for plugin in SERVICES.values():
        if isinstance(plugin, plugin_class):
            return plugin
    return None


def get_scm():
    """returns the loaded repository hosting service, if any."""
    return _find(base.BaseSCMServicePlugin)


def get_ci():
    """returns the loaded CI service, if any."""
    return _find(base.BaseCIServicePlugin)
