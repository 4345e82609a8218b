"""Package operators for executing installation, removal and updates."""

from sdkmgr.operators.sdkmanager import SdkManagerOperator, install_or_uninstall, update_all

__all__ = ["SdkManagerOperator", "install_or_uninstall", "update_all"]
