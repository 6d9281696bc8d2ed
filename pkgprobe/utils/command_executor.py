import subprocess
import shlex
from ..cli_logger import logger

def run_shell_command(command, env=None, cwd=None):
    """
    Executes a command and waits for it to finish.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): The complete environment for the child process.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (stdout, stderr, return_code).

    Raises:
        OSError: If the command could not be started at all.
        UnicodeDecodeError: If the output is not valid UTF-8.
    """
    logger.debug(f"Running: {shlex.join(command)}")
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
            check=False,
            cwd=cwd
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        raise
    return result.stdout, result.stderr, result.returncode
