from identity_service.app import main

main()
