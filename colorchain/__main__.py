from colorchain.app import run

run()
