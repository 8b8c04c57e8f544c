from onboard.cli import run

run()
