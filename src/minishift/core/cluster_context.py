"""Switch the ``oc`` client context to a profile's cluster."""
from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

OC_TIMEOUT_SECONDS = 30


def set_oc_context(profile: str, *, kubeconfig: Path, oc_binary: Optional[str] = None) -> bool:
    """Run ``oc config use-context <profile>`` against ``kubeconfig``.

    Returns:
        True when the context was switched. A missing ``oc`` binary or
        kubeconfig means there is no cluster to point at yet.
    """
    oc = oc_binary or shutil.which("oc")
    if not oc:
        logger.debug("oc binary not found; not switching context to %s", profile)
        return False
    kubeconfig = Path(kubeconfig)
    if not kubeconfig.exists():
        logger.debug("No kubeconfig at %s; not switching context to %s", kubeconfig, profile)
        return False

    cmd = [oc, "config", "use-context", profile, "--kubeconfig", str(kubeconfig)]
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=OC_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.warning("Could not switch oc context to '%s': %s", profile, exc)
        return False
    if proc.returncode != 0:
        logger.warning(
            "Could not switch oc context to '%s': %s", profile, (proc.stderr or "").strip()
        )
        return False
    return True


__all__ = ["set_oc_context"]
