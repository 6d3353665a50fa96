"""Shell integration snippets printed by ``markd shell <dialect>``.

Each snippet defines a ``goto`` function that changes into a bookmark
(or stays put when the name is unknown) and, where the shell supports it,
tab completion of bookmark names.
"""

from __future__ import annotations

_BASH = """\
# markd shell integration for bash
# Add to ~/.bashrc:  eval "$(markd shell bash)"
goto() {
    local dir
    dir="$(markd get --safe "$@")" && cd "$dir"
}
_markd_goto_complete() {
    local names
    names="$(markd list --plain 2>/dev/null | cut -d: -f1)"
    COMPREPLY=($(compgen -W "$names" -- "${COMP_WORDS[COMP_CWORD]}"))
}
complete -F _markd_goto_complete goto
"""

_ZSH = """\
# markd shell integration for zsh
# Add to ~/.zshrc:  eval "$(markd shell zsh)"
goto() {
    local dir
    dir="$(markd get --safe "$@")" && cd "$dir"
}
_markd_goto() {
    local -a names
    names=(${(f)"$(markd list --plain 2>/dev/null | cut -d: -f1)"})
    compadd -a names
}
if (( $+functions[compdef] )); then
    compdef _markd_goto goto
fi
"""

_FISH = """\
# markd shell integration for fish
# Add to ~/.config/fish/config.fish:  markd shell fish | source
function goto
    set -l dir (markd get --safe $argv)
    and cd $dir
end
complete -c goto -f -a '(markd list --plain 2>/dev/null | string split -f1 ":")'
"""

_POWERSHELL = """\
# markd shell integration for PowerShell
# Add to $PROFILE:  Invoke-Expression (& markd shell powershell | Out-String)
function goto {
    param([string]$Name)
    $dir = markd get --safe $Name
    if ($LASTEXITCODE -eq 0) { Set-Location $dir }
}
"""

SNIPPETS: dict[str, str] = {
    "bash": _BASH,
    "zsh": _ZSH,
    "fish": _FISH,
    "powershell": _POWERSHELL,
}


def snippet(dialect: str) -> str:
    """Return the integration snippet for *dialect*."""
    try:
        return SNIPPETS[dialect]
    except KeyError:
        raise ValueError(
            f"unsupported shell {dialect!r}; choose from {', '.join(SNIPPETS)}"
        ) from None
