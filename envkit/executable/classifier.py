from __future__ import annotations

import asyncio
import functools
import logging
import stat
from typing import Optional, Sequence

from envkit.env import Env
from envkit.errors import FileStatusUnavailableError
from envkit.system import SystemContext

from .policies import ExecutablePolicy, PosixPolicy, WindowsPolicy

logger = logging.getLogger(__name__)


def select_policy(
    context: SystemContext, suffixes: Optional[Sequence[str]] = None
) -> ExecutablePolicy:
    """
    Pick the classification rules for the context's platform.

    Args:
        context: Host facilities.
        suffixes: Executable suffixes overriding ``PATHEXT`` (Windows only).
    """
    if context.windows:
        if suffixes is None:
            suffixes = Env.from_context(context).pathext.get() or []
        logger.debug("Classifying by suffix: %s", ", ".join(suffixes))
        return WindowsPolicy(suffixes)
    return PosixPolicy(get_uid=context.get_uid, get_gid=context.get_gid)


class ExecutableClassifier:
    """
    Decides whether a single path names an executable file.

    Args:
        context: Host facilities, the live process when omitted.
    """

    def __init__(self, context: Optional[SystemContext] = None):
        self.context = context or SystemContext.current()

    def _stat(self, path: str, may_not_exist: bool):
        try:
            return self.context.fs.stat(path)
        except FileNotFoundError:
            if may_not_exist:
                return None
            raise

    def classify(
        self,
        path: str,
        st,
        policy: ExecutablePolicy,
        uid: Optional[int] = None,
        gid: Optional[int] = None,
    ) -> bool:
        """
        Apply the platform rules to an already obtained file status.
        """
        if st is None:
            return False

        mode = getattr(st, "st_mode", None)
        if mode is None:
            raise FileStatusUnavailableError(path, "mode")
        if not stat.S_ISREG(mode):
            return False

        return policy.is_executable(path, st, uid=uid, gid=gid)

    def is_executable_path(
        self,
        path: str,
        may_not_exist: bool = False,
        gid: Optional[int] = None,
        uid: Optional[int] = None,
        suffixes: Optional[Sequence[str]] = None,
        policy: Optional[ExecutablePolicy] = None,
    ) -> bool:
        """
        Determine whether the path is executable on the current platform.

        Args:
            path: Path to check; it need not exist when ``may_not_exist``.
            may_not_exist: Return False instead of raising when missing.
            gid: Effective group ID, the process's own when omitted (POSIX).
            uid: Effective user ID, the process's own when omitted (POSIX).
            suffixes: Executable suffixes overriding ``PATHEXT`` (Windows).
            policy: Pre-selected platform rules.

        Returns:
            bool: Determine result.

        Raises:
            OSError: If the status lookup fails for any other reason.
            EnvironmentStateError: If identity or file ownership is unknown.
        """
        policy = policy or select_policy(self.context, suffixes)
        st = self._stat(path, may_not_exist)
        return self.classify(path, st, policy, uid=uid, gid=gid)

    async def is_executable_path_async(
        self,
        path: str,
        may_not_exist: bool = False,
        gid: Optional[int] = None,
        uid: Optional[int] = None,
        suffixes: Optional[Sequence[str]] = None,
        policy: Optional[ExecutablePolicy] = None,
    ) -> bool:
        """
        Same as ``is_executable_path`` with the status lookup run in the
        default executor.
        """
        policy = policy or select_policy(self.context, suffixes)
        st = await asyncio.get_event_loop().run_in_executor(
            None, functools.partial(self._stat, path, may_not_exist)
        )
        return self.classify(path, st, policy, uid=uid, gid=gid)
