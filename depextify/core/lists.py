"""
Classification tables

Command names that are almost always present and therefore suppressed from
results by default.
"""

from depextify.core.models import ScanConfig


# Shell builtins and reserved words (POSIX sh, bash and zsh)
BUILTINS: frozenset[str] = frozenset({
    "!", "(", ")", ".", ":", "[", "[[", "]]", "{", "}",
    "alias", "autoload", "bg", "bind", "bindkey", "break", "builtin", "bye",
    "case", "cd", "chdir", "command", "comparguments", "compcall", "compctl",
    "compdescribe", "compfiles", "compgroups", "compquote", "comptags",
    "comptry", "compvalues", "continue", "declare", "dirs", "disable",
    "disown", "do", "done", "echo", "echotc", "echoti", "elif", "else",
    "emulate", "enable", "esac", "eval", "exec", "exit", "export", "false",
    "fc", "fg", "fi", "for", "function", "functions", "getcap", "getln",
    "getopts", "hash", "help", "history", "if", "integer", "jobs", "kill",
    "let", "limit", "local", "log", "logout", "noglob", "popd", "print",
    "printf", "pushd", "pushln", "pwd", "read", "readonly", "rehash",
    "return", "sched", "select", "set", "setopt", "shift", "source", "stat",
    "suspend", "test", "then", "times", "trap", "true", "ttyctl", "type",
    "typeset", "ulimit", "umask", "unalias", "unfunction", "unhash",
    "unlimit", "unset", "unsetopt", "until", "vared", "wait", "whence",
    "where", "while", "which", "zcompile", "zformat", "zftp", "zle",
    "zmodload", "zparseopts", "zprof", "zpty", "zregexparse", "zstat", "ztcp",
    "zstyle", "add-zsh-hook", "compaudit", "compinit",
})

# GNU coreutils
COREUTILS: frozenset[str] = frozenset({
    "arch", "b2sum", "base32", "base64", "basename", "basenc", "cat", "chcon",
    "chgrp", "chmod", "chown", "chroot", "cksum", "comm", "cp", "csplit",
    "cut", "date", "dd", "df", "dir", "dircolors", "dirname", "du", "expand",
    "expr", "factor", "fmt", "fold", "groups", "head", "hostid", "id",
    "install", "join", "link", "ln", "logname", "ls", "md5sum", "mkdir",
    "mkfifo", "mknod", "mktemp", "mv", "nice", "nl", "nohup", "nproc",
    "numfmt", "od", "paste", "pathchk", "pinky", "pr", "printenv", "ptx",
    "readlink", "realpath", "rm", "rmdir", "runcon", "seq", "sha1sum",
    "sha224sum", "sha256sum", "sha384sum", "sha512sum", "shred", "shuf",
    "sleep", "sort", "split", "stat", "stdbuf", "stty", "sum", "sync", "tac",
    "tail", "tee", "timeout", "touch", "tr", "truncate", "tsort", "tty",
    "uname", "unexpand", "uniq", "unlink", "uptime", "users", "vdir", "wc",
    "who", "whoami", "yes",
})

# Widely installed tools that rarely need to be declared
COMMON: frozenset[str] = frozenset({
    "awk", "grep", "egrep", "fgrep", "sed", "find", "xargs", "diff", "patch",
    "tar", "gzip", "gunzip", "bzip2", "bunzip2", "xz", "unxz", "zip", "unzip",
    "ssh", "scp", "rsync", "curl", "wget", "git", "make", "sudo", "apt",
    "apt-get", "dpkg", "ps", "top", "htop", "killall", "mount", "umount",
    "df", "du", "free", "lscpu", "lsblk", "lsusb", "lspci", "ip", "ifconfig",
    "ping", "netstat", "ss", "traceroute", "dig", "host", "nslookup",
    "hostname", "man", "info", "less", "more", "nano", "vim", "vi", "emacs",
})

CATEGORIES: dict[str, frozenset[str]] = {
    "builtins": BUILTINS,
    "coreutils": COREUTILS,
    "common": COMMON,
}


def get_builtins() -> list[str]:
    return sorted(BUILTINS)


def get_coreutils() -> list[str]:
    return sorted(COREUTILS)


def get_common() -> list[str]:
    return sorted(COMMON)


def build_suppression_set(config: ScanConfig) -> frozenset[str]:
    """
    Collect every command name a scan should drop.

    Each table is toggled independently; the extra ignore list always applies.
    """
    suppressed: set[str] = set()
    if config.no_builtins:
        suppressed |= BUILTINS
    if config.no_coreutils:
        suppressed |= COREUTILS
    if config.no_common:
        suppressed |= COMMON
    suppressed.update(name.strip() for name in config.extra_ignores if name.strip())
    return frozenset(suppressed)
