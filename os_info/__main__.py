from os_info.cli import main

main()
