# 浏览器界面模块
