from spacegame.app import main

main()
