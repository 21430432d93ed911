"""Centralized configuration management."""

import os
import shlex
from dataclasses import dataclass, field
from typing import Optional

# Topic directories accepted under blog/ for onboarded posts
VALID_TOPICS = (
    "agents",
    "mcp",
    "tools",
    "model-providers",
    "prompts-and-output",
    "getting-started",
    "advisors",
    "community",
)


@dataclass
class Config:
    """Centralized configuration management"""
    repo_root: Optional[str] = None  # Docs repo root (None = $SPRING_MDX_REPO_ROOT or cwd)
    blog_dir: str = "blog"
    default_validate_dir: str = "blog/"
    mapping_file: str = "tools/topic-mapping.properties"
    link_check_command: Optional[list[str]] = None  # None = $SPRING_MDX_LINK_CHECK or "mintlify broken-links"
    valid_topics: tuple[str, ...] = field(default=VALID_TOPICS)

    def __post_init__(self):
        if self.repo_root is None:
            self.repo_root = os.environ.get('SPRING_MDX_REPO_ROOT', os.getcwd())
        if self.link_check_command is None:
            command = os.environ.get('SPRING_MDX_LINK_CHECK', 'mintlify broken-links')
            self.link_check_command = shlex.split(command)

        # Resolve relative paths against the docs repo root
        for name in ('blog_dir', 'mapping_file'):
            value = getattr(self, name)
            if not os.path.isabs(value):
                setattr(self, name, os.path.join(self.repo_root, value))
