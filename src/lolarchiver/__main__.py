from lolarchiver.app import main

main()
