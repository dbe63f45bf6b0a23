from skycast.cli import run

run()
