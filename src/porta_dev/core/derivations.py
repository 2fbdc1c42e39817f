"""Derived option values computed after flag parsing.

Each hook reads already-resolved options and writes its result with
:meth:`~porta_dev.core.options.OptionsStore.set_if_absent`, so a value
the user passed explicitly always survives.  Hooks whose inputs are
missing leave the store untouched.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from porta_dev.core.options import OptionSource, OptionsStore
from porta_dev.core.protocols import BranchProvider

API_HOST_PREFIX: str = "api"
APPS_SEGMENT: str = "apps"
API_PORT: int = 6443
DIGEST_LENGTH: int = 7


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def project_name(branch: str) -> str:
    """``feature/foo`` -> ``feature-foo``."""
    return branch.replace("/", "-")


def image_tag(repository: str, project: str) -> str:
    return f"{repository}:{project}"


def cluster_endpoint(cluster_domain: str) -> str:
    return f"https://{API_HOST_PREFIX}.{cluster_domain}:{API_PORT}"


def wildcard_domain(project: str, cluster_domain: str) -> str:
    """Short, stable per-project subdomain under the cluster's apps domain."""
    digest = hashlib.sha1(project.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
    return f"{digest}.{APPS_SEGMENT}.{cluster_domain}"


# ---------------------------------------------------------------------------
# Hooks (run by the option parser in declaration order)
# ---------------------------------------------------------------------------

def derive_branch(options: OptionsStore, branches: BranchProvider) -> None:
    """Seed ``branch`` from the checkout at ``porta_dir`` unless supplied."""
    # set_if_absent would keep a supplied branch anyway; this skips the git call
    if options.source_of("branch") not in (None, OptionSource.DEFAULT):
        return
    porta_dir = options.get("porta_dir")
    if porta_dir:
        repository = Path(str(porta_dir)).expanduser()
        options.set_if_absent("branch", branches.current_branch(repository))


def derive_project(options: OptionsStore, _branches: BranchProvider) -> None:
    branch = options.get("branch")
    if branch:
        options.set_if_absent("project", project_name(str(branch)))


def derive_image_tag(options: OptionsStore, _branches: BranchProvider) -> None:
    repository = options.get("image_repository")
    project = options.get("project")
    if repository and project:
        options.set_if_absent("image_tag", image_tag(str(repository), str(project)))


def derive_cluster_endpoint(options: OptionsStore, _branches: BranchProvider) -> None:
    domain = options.get("cluster_domain")
    if domain:
        options.set_if_absent("cluster_endpoint", cluster_endpoint(str(domain)))


def derive_wildcard_domain(options: OptionsStore, _branches: BranchProvider) -> None:
    project = options.get("project")
    domain = options.get("cluster_domain")
    if project and domain:
        options.set_if_absent(
            "wildcard_domain", wildcard_domain(str(project), str(domain)),
        )
