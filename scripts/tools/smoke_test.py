"""
smoke_test.py — minimal proof-of-life for OMPython + OpenModelica

- starts an OMC session
- prints the compiler version
- loads the Modelica Standard Library
"""

import OMPython

from remote_om.environment import configure_environment, default_openmodelica_home


def main():
    configure_environment(default_openmodelica_home())
    omc = OMPython.OMCSessionZMQ()
    try:
        print("OMC version:", omc.sendExpression("getVersion()"))
        ok = omc.sendExpression("loadModel(Modelica)")
        print("loadModel(Modelica)", "successful" if ok is True else "failed")
    finally:
        try:
            omc.sendExpression("quit()")
        except Exception as e:
            print("[warn] quit failed:", e)


if __name__ == "__main__":
    main()
