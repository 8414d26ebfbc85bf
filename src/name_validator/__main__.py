from name_validator.cli import main

main()
