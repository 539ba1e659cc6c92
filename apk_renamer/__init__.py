"""
APK Renamer: post-build archival copies of assembled Android packages.

After an ``assemble*`` build finishes, every APK found under the module's
``outputs/apk/<build type>`` folders is copied into a ``modified`` subfolder
under a descriptive name carrying the application id, git branch, build
type, version and a timestamp.
"""

__version__ = "1.0.0"
__author__ = "APK Renamer Team"
