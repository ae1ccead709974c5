# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Image reference parsing for the --docker-image and --docker-image-tag options.
Splits references like 'mud-manager', 'localhost:5000/mud-manager:v1' or
'registry.gitlab.com/group/image@sha256:...' into their parts.
"""

import re
from typing import Optional
from dataclasses import dataclass

TAG_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}$")
NAME_COMPONENT_PATTERN = re.compile(r"^[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*$")


@dataclass
class ImageReference:
    """
    Parsed Docker image reference.

    ``name`` keeps the registry and repository exactly as written so that
    the reference handed to docker is the one the user gave us.

    Examples:
        - mud-manager -> name 'mud-manager', tag None
        - localhost:5000/mud-manager:v1 -> name 'localhost:5000/mud-manager', tag 'v1'
        - gcr.io/project/image@sha256:abc -> name 'gcr.io/project/image', digest 'sha256:abc'
    """

    name: str
    tag: Optional[str] = None
    digest: Optional[str] = None

    @classmethod
    def parse(cls, reference: str) -> "ImageReference":
        """
        Parse a Docker image reference string.

        Args:
            reference: Image reference string (e.g., 'mud-manager', 'myuser/myimage:v1')

        Returns:
            Parsed ImageReference object.

        Raises:
            ValueError: If the reference is empty or malformed.
        """
        if not reference:
            raise ValueError("Empty image reference")

        digest = None
        if "@" in reference:
            reference, digest = reference.rsplit("@", 1)
            if not digest:
                raise ValueError("Empty digest in image reference")

        tag = None
        if ":" in reference:
            # A colon followed by a slash belongs to a registry port
            # (localhost:5000/image), not to a tag.
            last_colon = reference.rfind(":")
            after_colon = reference[last_colon + 1 :]
            if "/" not in after_colon:
                tag = after_colon
                reference = reference[:last_colon]

        if tag is not None and not TAG_PATTERN.match(tag):
            raise ValueError(f"Invalid tag '{tag}' in image reference")

        parts = reference.split("/")
        repository_parts = parts
        if len(parts) > 1:
            first_part = parts[0]
            if "." in first_part or ":" in first_part or first_part == "localhost":
                repository_parts = parts[1:]

        for component in repository_parts:
            if not NAME_COMPONENT_PATTERN.match(component):
                raise ValueError(f"Invalid repository component '{component}' in image reference")

        return cls(name=reference, tag=tag, digest=digest)

    @staticmethod
    def validate_tag(tag: str) -> str:
        """Check a bare tag against Docker's tag grammar and return it."""
        if not TAG_PATTERN.match(tag or ""):
            raise ValueError(f"Invalid image tag '{tag}'")
        return tag

    @property
    def is_pinned(self) -> bool:
        """True if the reference already carries a tag or a digest."""
        return self.tag is not None or self.digest is not None

    def with_tag(self, tag: str) -> "ImageReference":
        """Return a copy of this reference pointing at ``tag``."""
        return ImageReference(name=self.name, tag=self.validate_tag(tag))

    def __str__(self) -> str:
        if self.digest:
            return f"{self.name}@{self.digest}"
        if self.tag:
            return f"{self.name}:{self.tag}"
        return self.name

    def __repr__(self) -> str:
        return f"ImageReference({self})"
