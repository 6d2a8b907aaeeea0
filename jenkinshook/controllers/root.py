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

from pecan import conf

from jenkinshook import services
from jenkinshook.controllers import introspection
from jenkinshook.controllers.api.v2 import hooks as v2_hooks
from jenkinshook.controllers.api.v2 import jenkins as v2_jenkins


logger = logging.getLogger(__name__)


class V2Controller(object):
    about = introspection.IntrospectionController()
    jenkins = v2_jenkins.JenkinsController()
    hooks = v2_hooks.HooksController()


class RootController(object):
    def __init__(self, *args, **kwargs):
        services.load_services(conf)
        self.v2 = V2Controller()
        self.about = introspection.IntrospectionController()
