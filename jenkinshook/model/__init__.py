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


import enum


class CloneType(enum.Enum):
    """How the repository clone URL sent to Jenkins is obtained."""
    HTTP = 'http'
    SSH = 'ssh'
    CUSTOM = 'custom'

    @classmethod
    def parse(cls, value):
        """returns the matching clone type, or None if value is empty or
        unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            return None


class Repository(object):
    """A project/slug pair identifying a repository on the host."""

    def __init__(self, project_key, slug):
        self.project_key = project_key
        self.slug = slug

    @property
    def name(self):
        return '%s/%s' % (self.project_key, self.slug)

    def __eq__(self, other):
        if not isinstance(other, Repository):
            return NotImplemented
        return (self.project_key, self.slug) == (other.project_key,
                                                 other.slug)

    def __hash__(self):
        return hash((self.project_key, self.slug))

    def __repr__(self):
        return '<Repository %s>' % self.name


class NotificationResult(object):

    def __init__(self, successful, url, message):
        self.successful = successful
        self.url = url
        self.message = message

    def to_dict(self):
        return {'successful': self.successful,
                'url': self.url,
                'message': self.message}

    def __repr__(self):
        return ('<NotificationResult successful=%s url=%s message=%r>'
                % (self.successful, self.url, self.message))
