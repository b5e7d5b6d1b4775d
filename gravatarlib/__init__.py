'''
Build Gravatar avatar URLs from email addresses
'''
