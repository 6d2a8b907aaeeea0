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


class ServiceNotAvailableError(Exception):
    """Raised if a service plugin cannot be configured"""
    pass


class UnavailableActionError(Exception):
    """Raised if a service does not know how to do the requested action"""
    pass


class SshServerDisabledError(UnavailableActionError):
    """Raised when an SSH clone URL is requested while the internal SSH
    server is turned off"""
    pass


class InvalidSettingsError(Exception):
    """Raised when the Jenkins hook settings of a repository are not
    usable"""

    def __init__(self, errors):
        self.errors = errors
        msg = ', '.join('%s: %s' % (k, errors[k]) for k in sorted(errors))
        super(InvalidSettingsError, self).__init__(msg)
