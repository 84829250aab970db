from vidtrim.cli import run

run()
