from timecounter._cli import main

main()
