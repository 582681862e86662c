from einkrelay.main import main

main()
