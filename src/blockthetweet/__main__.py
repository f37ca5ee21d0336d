from blockthetweet.main import run

run()
