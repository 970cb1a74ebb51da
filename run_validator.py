#!/usr/bin/env python3
"""
run_validator.py

Drives the shell (Repl.py) end to end: each check pipes a list of lines
into the shell's stdin (script mode, plain prompt), then inspects stdout
with the prompts removed, stderr and the scratch directory. Run it from anywhere:

    python run_validator.py

Results go to shell_test_results.txt and are printed to the console.
"""
import os
import subprocess
import sys
import tempfile

HERE = os.path.dirname(os.path.abspath(__file__))

# Command to run the shell
SHELL_CMD = [sys.executable, os.path.join(HERE, "Repl.py")]

# Output result file
RESULT_FILE = "shell_test_results.txt"

# Generic runner: feed lines on stdin inside `cwd`, return (code, stdout, stderr)
def run_script(lines, cwd, timeout=20):
    script = "".join(L.rstrip() + "\n" for L in lines)
    try:
        proc = subprocess.run(SHELL_CMD, input=script, cwd=cwd,
                              capture_output=True, text=True, timeout=timeout)
        return proc.returncode, proc.stdout or "", proc.stderr or ""
    except subprocess.TimeoutExpired:
        return None, "", "<TIMEOUT>"

# Helper: write result to result file and also print
def write_result(fobj, name, ok, code, out, err):
    fobj.write(f"TEST: {name}\n")
    fobj.write(f"RESULT: {'PASS' if ok else 'FAIL'}\n")
    fobj.write(f"EXIT: {code}\n")
    fobj.write("STDOUT:\n" + out + "\n")
    fobj.write("STDERR:\n" + err + "\n")
    fobj.write("-" * 60 + "\n")
    fobj.flush()
    print(f"{name}: {'PASS' if ok else 'FAIL'}")
    return ok

# Every line read is preceded by the plain prompt `<cwd> $ `
def strip_prompts(out, cwd):
    return out.replace(f"{os.path.realpath(cwd)} $ ", "")

def read_file(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def main():
    passed = 0
    total = 0
    with open(RESULT_FILE, "w", encoding="utf-8") as f:
        f.write("Shell validator run\n")
        f.write("Command: " + " ".join(SHELL_CMD) + "\n")
        f.write("=" * 60 + "\n\n")

        def check(name, lines, predicate):
            nonlocal passed, total
            with tempfile.TemporaryDirectory() as tmp:
                code, out, err = run_script(lines, tmp)
                prompts = out.count(f"{os.path.realpath(tmp)} $ ")
                out = strip_prompts(out, tmp)
                try:
                    ok = code == 0 and prompts > 0 and bool(predicate(tmp, out, err))
                except OSError:
                    ok = False
            total += 1
            if write_result(f, name, ok, code, out, err):
                passed += 1

        # 1) unknown command
        check("unknown command", ["frobnicate"],
              lambda tmp, out, err: err == "Command not found: frobnicate\n")

        # 2) cd to a missing directory leaves cwd alone
        check("cd missing", ["cd nowhere", "pwd"],
              lambda tmp, out, err: out.strip() == os.path.realpath(tmp)
              and "Invalid directory" in err)

        # 3) mkdir -p then ls
        check("mkdir/ls", ["mkdir a/b/c", "ls a"],
              lambda tmp, out, err: out == "[DIR] b\n")

        # 4) touch then cat
        check("touch/cat", ["touch f", "cat f"],
              lambda tmp, out, err: out == "\n" and err == "")

        # 5) echo redirection
        check("echo redirection", ["echo hello world > out.txt", "cat out.txt"],
              lambda tmp, out, err: read_file(os.path.join(tmp, "out.txt")) == "hello world "
              and out == "hello world \n")

        # 6) rm with and without -r
        check("rm -r", ["mkdir d/e", "touch d/e/f", "rm d", "ls", "rm -r d", "ls"],
              lambda tmp, out, err: out == "[DIR] d\n" and err.startswith("Error: ")
              and not os.path.exists(os.path.join(tmp, "d")))

        # 7) hidden files
        check("ls -a", ["touch .dot", "touch vis", "ls", "ls -a"],
              lambda tmp, out, err: out == "[FILE] vis\n[FILE] .dot\n[FILE] vis\n")

        # 8) exit stops the loop
        check("exit", ["exit", "mkdir never"],
              lambda tmp, out, err: not os.path.exists(os.path.join(tmp, "never")))

        # 9) cp / mv
        check("cp/mv", ["echo sample > a.txt", "cp a.txt b.txt", "mv b.txt c.txt", "ls"],
              lambda tmp, out, err: out == "[FILE] a.txt\n[FILE] c.txt\n"
              and read_file(os.path.join(tmp, "c.txt")) == "sample ")

        # 10) usage errors
        check("usage", ["cp onlyone"],
              lambda tmp, out, err: err == "usage: cp <src> <dst>\n")

        # 11) end of input exits 0
        check("end of input", ["pwd"],
              lambda tmp, out, err: out.strip() == os.path.realpath(tmp))

    print(f"{passed}/{total} passed")
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(main())
